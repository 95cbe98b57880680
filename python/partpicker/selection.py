"""Selection view models: building them for a page load and reading them back from a post.

Each catalog part becomes one SelectionViewModel when the page is prepared.
Whether a part starts out checked is decided by a checked policy; the
default policy pre-checks parts with an even id.

The view models travel to the browser as form fields named
``items-<index>-<field>`` and come back the same way on submit:

    items-0-id=1&items-0-name=Headlights&items-1-id=2&items-1-name=...&items-1-checked=true

An unchecked checkbox is simply absent from the post.
"""

import re
from collections.abc import Callable, Iterable, Mapping

from pydantic import BaseModel, ValidationError

from partpicker.catalog import PartRecord
from partpicker.errors import ConfigurationError, FormDataError

__all__ = [
    "SelectionViewModel",
    "SelectionInitializer",
    "CheckedPolicy",
    "even_id",
    "none_checked",
    "all_checked",
    "POLICIES",
    "get_policy",
    "field_name",
    "parse_selection_form",
]

CheckedPolicy = Callable[[PartRecord], bool]

# Matches form keys like items-3-checked
_FIELD_PATTERN = re.compile(r'^items-(\d+)-(id|name|checked)$')

_CHECKED_VALUES = {'true', 'on', '1'}


class SelectionViewModel(BaseModel):
    """A catalog part plus the UI-only checked flag for one page lifecycle."""

    id: int
    name: str
    checked: bool = False


def even_id(record: PartRecord) -> bool:
    return record.id % 2 == 0


def none_checked(record: PartRecord) -> bool:
    return False


def all_checked(record: PartRecord) -> bool:
    return True


POLICIES: dict[str, CheckedPolicy] = {
    'even-id': even_id,
    'none': none_checked,
    'all': all_checked,
}


def get_policy(name: str) -> CheckedPolicy:
    """Look up a checked policy by its configured name."""
    try:
        return POLICIES[name]
    except KeyError:
        raise ConfigurationError("Unknown checked policy", name=name, choices=POLICIES) from None


class SelectionInitializer:
    """Builds the per-request view models from catalog records.

    Args:
        policy: Decides the initial checked state of each record.
                Defaults to pre-checking even ids.

    Example:
        >>> records = [PartRecord(id=1, name="a"), PartRecord(id=2, name="b")]
        >>> [vm.checked for vm in SelectionInitializer().build(records)]
        [False, True]
    """

    def __init__(self, policy: CheckedPolicy = even_id):
        self.policy = policy

    def build(self, records: Iterable[PartRecord]) -> list[SelectionViewModel]:
        return [
            SelectionViewModel(id=record.id, name=record.name, checked=self.policy(record))
            for record in records
        ]


def field_name(index: int, field: str) -> str:
    """Form field name for one attribute of the view model at ``index``."""
    return f'items-{index}-{field}'


def parse_selection_form(form: Mapping[str, str]) -> list[SelectionViewModel]:
    """Rebuild the posted view models, ordered by their form index.

    Keys that are not selection fields are ignored. Checkbox values
    ``true``, ``on`` and ``1`` (any case) count as checked.

    Args:
        form: The posted form (a starlette FormData or any str mapping).

    Returns:
        View models in index order.

    Raises:
        FormDataError: If a selection field is not text, an index is
                       missing its id or name, or the id is not an integer.
    """
    rows: dict[int, dict[str, str]] = {}
    for key in form.keys():
        match = _FIELD_PATTERN.match(key)
        if not match:
            continue
        index, field = int(match.group(1)), match.group(2)
        value = form[key]
        # multipart posts can carry UploadFile objects under any key
        if not isinstance(value, str):
            raise FormDataError("Selection field must be a text value", field=key)
        rows.setdefault(index, {})[field] = value

    items = []
    for index in sorted(rows):
        row = rows[index]
        for required in ('id', 'name'):
            if required not in row:
                raise FormDataError("Missing selection field", field=field_name(index, required))

        checked = row.get('checked', '').strip().lower() in _CHECKED_VALUES
        try:
            items.append(SelectionViewModel(id=row['id'], name=row['name'], checked=checked))
        except ValidationError as e:
            raise FormDataError(
                f"Invalid part id {row['id']!r}", field=field_name(index, 'id')
            ) from e

    return items
