"""Status table generator for `get` commands."""

from typing import List

from rich import box
from rich.table import Table

from ..model.kubernetes import ResourceType
from ..model.report import ResourceStatus


class StatusReporter:
    """Renders resource status rows as a table."""

    def __init__(self, resource_type: ResourceType, all_namespaces: bool = False):
        self.resource_type = resource_type
        self.all_namespaces = all_namespaces

    def headers(self) -> List[str]:
        """Column headers for this kind."""
        headers = ["NAME", "READY", "MESSAGE"]
        if self.resource_type.revision_path:
            headers.append("REVISION")
        headers.append("SUSPENDED")
        if self.all_namespaces:
            headers.insert(0, "NAMESPACE")
        return headers

    def row(self, status: ResourceStatus) -> List[str]:
        values = [status.name, status.ready, status.message]
        if self.resource_type.revision_path:
            values.append(status.revision or "")
        values.append(str(status.suspended))
        if self.all_namespaces:
            values.insert(0, status.namespace)
        return values

    def build_table(self, statuses: List[ResourceStatus]) -> Table:
        """Build a borderless table, one row per resource."""
        table = Table(box=box.SIMPLE_HEAD, show_header=True, header_style="bold", pad_edge=False)
        for header in self.headers():
            table.add_column(header, overflow="fold")

        for status in statuses:
            table.add_row(*self.row(status))

        return table
