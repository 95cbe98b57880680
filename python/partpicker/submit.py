"""Reporting the checked parts when the selection form is posted."""

import logging
from collections.abc import Iterable

from pydantic import BaseModel

from partpicker.log import get_logger
from partpicker.selection import SelectionViewModel

__all__ = ["SubmitReport", "SelectionSubmitHandler"]


class SubmitReport(BaseModel):
    page: str
    checked: list[SelectionViewModel] = []

    @property
    def nothing_checked(self) -> bool:
        return not self.checked


class SelectionSubmitHandler:
    """Logs which parts came back checked.

    Either one "Checked items on <page> post" line followed by an
    "Id: <id> Name: <name>" line per checked part, or a single
    "Nothing checked for <page> post" line. Never raises; redirecting
    back to the page is left to the caller.
    """

    def __init__(self, page_name: str = "Index", logger: logging.Logger | None = None):
        self.page_name = page_name
        self.log = logger or get_logger(__name__)

    def on_submit(self, items: Iterable[SelectionViewModel]) -> SubmitReport:
        checked = [item for item in items if item.checked]
        report = SubmitReport(page=self.page_name, checked=checked)

        if report.nothing_checked:
            self.log.info("Nothing checked for %s post", self.page_name, extra={"page": self.page_name})
            return report

        self.log.info("Checked items on %s post", self.page_name, extra={"page": self.page_name})
        for item in checked:
            self.log.info(
                "Id: %s Name: %s",
                item.id,
                item.name,
                extra={"page": self.page_name, "part_id": item.id, "part_name": item.name},
            )
        return report
