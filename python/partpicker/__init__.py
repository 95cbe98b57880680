"""Part picker - server-rendered checkbox list with aria-checked kept in sync.

Public API exports:
- Catalog and view models (from partpicker.catalog, partpicker.selection)
- ARIA sync controller and strategies (from partpicker.aria)
- Submit handling (from partpicker.submit)
- HTML helpers and the component decorator (from partpicker.html, partpicker.decorators)
"""

# Catalog and view models
from partpicker.catalog import PARTS, PartCatalog, PartRecord
from partpicker.selection import (
    POLICIES,
    SelectionInitializer,
    SelectionViewModel,
    get_policy,
    parse_selection_form,
)

# Client-side behaviour
from partpicker.aria import (
    STRATEGIES,
    AriaSyncController,
    CheckboxElement,
    ForceAriaCheckedFalse,
    ToggleAriaChecked,
    bootstrap_script,
    get_strategy,
    select_controls,
    set_aria_checked,
    set_aria_checked_false,
)

# Form post
from partpicker.submit import SelectionSubmitHandler, SubmitReport

# Rendering
from partpicker.decorators import component
from partpicker.html import escape_html, render_aria, render_attr, render_class, safe, spread_attrs

# Errors
from partpicker.errors import CatalogError, ConfigurationError, FormDataError, PartPickerError

__all__ = [
    # Catalog and view models
    'PARTS',
    'PartCatalog',
    'PartRecord',
    'POLICIES',
    'SelectionInitializer',
    'SelectionViewModel',
    'get_policy',
    'parse_selection_form',
    # Client-side behaviour
    'STRATEGIES',
    'AriaSyncController',
    'CheckboxElement',
    'ForceAriaCheckedFalse',
    'ToggleAriaChecked',
    'bootstrap_script',
    'get_strategy',
    'select_controls',
    'set_aria_checked',
    'set_aria_checked_false',
    # Form post
    'SelectionSubmitHandler',
    'SubmitReport',
    # Rendering
    'component',
    'escape_html',
    'render_aria',
    'render_attr',
    'render_class',
    'safe',
    'spread_attrs',
    # Errors
    'PartPickerError',
    'CatalogError',
    'ConfigurationError',
    'FormDataError',
]
