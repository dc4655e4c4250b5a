"""OData query option assembly."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple, Union
from urllib.parse import urlencode

ListOption = Union[str, Sequence[str]]


def _join(value: ListOption) -> str:
    if isinstance(value, str):
        return value
    return " ".join(str(v) for v in value)


@dataclass
class QueryOptions:
    """Optional query parameters of one request.

    An option is sent only when it differs from its empty value
    (``""``, ``()``, ``0``, ``False`` or ``None``). List options are sent as
    one parameter whose value is the space-joined entries.
    """

    select: ListOption = ()
    expand: ListOption = ()
    orderby: ListOption = ()
    filter: str = ""
    search: str = ""
    top: int = 0
    skip: int = 0
    count: bool = False
    params: Dict[str, Optional[str]] = field(default_factory=dict)

    def pairs(self) -> List[Tuple[str, str]]:
        out: List[Tuple[str, str]] = []
        if self.count:
            out.append(("$count", "true"))
        if self.expand:
            out.append(("$expand", _join(self.expand)))
        if self.filter:
            out.append(("$filter", self.filter))
        if self.orderby:
            out.append(("$orderby", _join(self.orderby)))
        if self.search:
            out.append(("$search", self.search))
        if self.select:
            out.append(("$select", _join(self.select)))
        if self.skip:
            out.append(("$skip", str(int(self.skip))))
        if self.top:
            out.append(("$top", str(int(self.top))))
        for name, value in self.params.items():
            if value:
                out.append((name, str(value)))
        out.sort(key=lambda kv: kv[0].lstrip("$").lower())
        return out

    def encode(self) -> str:
        """Form-encode the non-empty options; ``""`` when none are set."""
        return urlencode(self.pairs(), safe="$")
