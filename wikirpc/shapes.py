'''
Shapes of the composite values the wiki sends and accepts.

These describe what DokuWiki documents; nothing checks a value against them.
Dates arrive as datetime.datetime when the server sends an XML-RPC date and as
an int when it sends a unix timestamp.
'''
import datetime
from typing import Any, Dict, List, TypedDict, Union

Timestamp = Union[int, datetime.datetime]


class PageVersion(TypedDict, total=False):
    user: str
    ip: str
    type: str
    sum: str
    modified: Timestamp
    version: int


class PageInfo(TypedDict, total=False):
    name: str
    lastModified: Timestamp
    author: str
    version: int


class PutAttributes(TypedDict, total=False):
    sum: str
    minor: bool


class Link(TypedDict):
    # 'local' or 'extern'
    type: str
    # page id, or the full url for external links
    page: str
    href: str


class PageListItem(TypedDict, total=False):
    id: str
    perms: int
    size: int
    lastModified: Timestamp
    rev: int
    mtime: int
    hash: str


class SearchResult(TypedDict, total=False):
    id: str
    score: int
    rev: int
    mtime: int
    size: int
    snippet: str
    title: str


class RecentChange(TypedDict, total=False):
    name: str
    lastModified: Timestamp
    author: str
    version: int


class RecentMediaChange(RecentChange, total=False):
    perms: int
    size: int


class AttachmentInfo(TypedDict, total=False):
    size: int
    lastModified: Timestamp


class PutAttachmentParams(TypedDict, total=False):
    # overwrite an existing media file
    ow: bool


class LockRequest(TypedDict, total=False):
    lock: List[str]
    unlock: List[str]


class LockResult(TypedDict):
    locked: List[str]
    lockfail: List[str]
    unlocked: List[str]
    unlockfail: List[str]


class _CreateUserRequired(TypedDict):
    user: str
    name: str
    mail: str


class CreateUserInput(_CreateUserRequired, total=False):
    password: str
    groups: List[str]
    notify: bool


# {'schema': {'fieldlabel': value, ...}, ...}
StructData = Dict[str, Dict[str, Any]]
