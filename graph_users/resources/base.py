"""Request builder base class and verb mixins."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Type

from ..models import GraphCollection, GraphRecord
from ..paths import encode_path, join_path
from ..query import ListOption, QueryOptions
from ..serialization import Message

if TYPE_CHECKING:  # pragma: no cover
    from ..client import GraphClient


def if_match_header(if_match: str) -> Optional[Dict[str, str]]:
    return {"If-Match": if_match} if if_match else None


class RequestBuilder:
    """Shared client plus the encoded path of one Graph resource."""

    model: Type[GraphRecord] = GraphRecord

    def __init__(self, client: "GraphClient", path: str) -> None:
        self.client = client
        self.path = path

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.path!r})"

    def _nav(self, cls, *segments: str):
        return cls(self.client, join_path(self.path, *segments))

    def _url(self, query: Optional[QueryOptions] = None, *segments: str) -> str:
        path = join_path(self.path, *segments) if segments else self.path
        return self.client.url(path, query)

    def _action(self, name: str, body: Any = None) -> None:
        """POST to a bound action such as ``accept`` or ``dismissReminder``."""
        message = Message.json(body) if body is not None else None
        self.client.post(self._url(None, name), message)


# -------------------- Single resources --------------------

class GetMixin(RequestBuilder):
    def get(self, *, select: ListOption = (), expand: ListOption = ()):
        query = QueryOptions(select=select, expand=expand)
        return self.client.get(self._url(query), self.model.from_dict)


class UpdateMixin(RequestBuilder):
    def update(self, body: Any, *, if_match: str = ""):
        """PATCH the resource; returns the updated record, or ``None`` on 204."""
        return self.client.patch(
            self._url(), Message.json(body), self.model.from_dict, if_match_header(if_match)
        )


class DeleteMixin(RequestBuilder):
    def delete(self, *, if_match: str = "") -> None:
        self.client.delete(self._url(), if_match_header(if_match))


# -------------------- Collections --------------------

class ListMixin(RequestBuilder):
    def _list(self, query: QueryOptions) -> GraphCollection:
        return self.client.get(self._url(query), GraphCollection.parser(self.model.from_dict))

    def _list_all(self, query: QueryOptions) -> List[Any]:
        return self.client.get_all_pages(self._url(query), self.model.from_dict)

    def list(
        self,
        *,
        top: int = 0,
        skip: int = 0,
        filter: str = "",
        count: bool = False,
        orderby: ListOption = (),
        select: ListOption = (),
        expand: ListOption = (),
        search: str = "",
    ) -> GraphCollection:
        """Return one page of the collection."""
        return self._list(
            QueryOptions(
                top=top,
                skip=skip,
                filter=filter,
                count=count,
                orderby=orderby,
                select=select,
                expand=expand,
                search=search,
            )
        )

    def list_all(self, **options: Any) -> List[Any]:
        """Return every item, following ``@odata.nextLink``; same options as ``list``."""
        return self._list_all(QueryOptions(**options))


class CreateMixin(RequestBuilder):
    def create(self, body: Any):
        return self.client.post(self._url(), Message.json(body), self.model.from_dict)


class CountMixin(RequestBuilder):
    def count(self, *, filter: str = "", search: str = "") -> int:
        """Number of items in the collection (``GET .../$count``)."""
        return self.client.get(self._url(QueryOptions(filter=filter, search=search), "$count"), int)


class ItemsMixin(RequestBuilder):
    item_class: Type[RequestBuilder] = RequestBuilder

    def by_id(self, item_id: str):
        return self._nav(self.item_class, encode_path(item_id))
