'''
The remote method catalogue.

Every entry is declared as a typed coroutine method whose body never runs: the
remote() decorator binds the arguments against the declared signature and
hands them to WikiRpcClient.call under the remote name. All behaviour lives on
the server.

>>> wiki = DokuWiki(client)
>>> await wiki.dokuwiki.login('me', 'secret')
True
>>> await wiki.wiki.put_page('playground', 'hello', {'sum': 'test'})
True

https://www.dokuwiki.org/devel:xmlrpc#available_functions
'''
import functools
import inspect
from typing import Any, Callable, Dict, List, Optional, TypeVar

from . import shapes

F = TypeVar('F', bound=Callable[..., Any])

# remote method name -> declared function
CATALOGUE: Dict[str, Callable[..., Any]] = {}


def _trim_optional(signature, bound):
    '''
    Positional parameter list for the call. Trailing optional parameters the
    caller left at None are not sent, so the server applies its own default.
    '''
    params = list(signature.parameters.values())[1:]
    values = [bound.arguments[p.name] for p in params]
    while params and values[-1] is None and params[-1].default is None:
        params.pop()
        values.pop()
    return values


def remote(name: str) -> Callable[[F], F]:
    def _remote(f):
        signature = inspect.signature(f)
        void = signature.return_annotation is None

        @functools.wraps(f)
        async def invoke(self, *args, **kwargs):
            bound = signature.bind(self, *args, **kwargs)
            bound.apply_defaults()
            result = await self._client.call(
                name, _trim_optional(signature, bound))
            if void:
                return None
            return result

        invoke.remote_name = name
        CATALOGUE[name] = invoke
        return invoke
    return _remote


class Service:
    def __init__(self, client):
        self._client = client


class WikiService(Service):
    '''
    Wiki RPC Interface 2.0 methods, as DokuWiki documents them.

    http://www.jspwiki.org/wiki/WikiRPCInterface2
    '''

    @remote('wiki.getRPCVersionSupported')
    async def get_rpc_version_supported(self) -> int:
        '''Returns 2, the supported RPC API version.'''

    @remote('wiki.aclCheck')
    async def acl_check(self, pagename: str) -> int:
        '''Permission level the current user has on the page.'''

    @remote('wiki.getPage')
    async def get_page(self, pagename: str,
                       timestamp: Optional[int] = None) -> str:
        '''Raw wiki text of a page, or of the revision at timestamp.'''

    @remote('wiki.getPageVersion')
    async def get_page_version(self, pagename: str, version: int) -> str:
        '''Raw wiki text of a specific revision.'''

    @remote('wiki.getPageVersions')
    async def get_page_versions(self, pagename: str,
                                offset: int) -> List[shapes.PageVersion]:
        '''
        Available revisions of a page. How many come back is set by the
        wiki's "recent" setting; offset pages further back in the history.
        '''

    @remote('wiki.getPageInfo')
    async def get_page_info(self, pagename: str) -> shapes.PageInfo:
        pass

    @remote('wiki.getPageInfoVersion')
    async def get_page_info_version(self, pagename: str,
                                    version: int) -> shapes.PageInfo:
        pass

    @remote('wiki.getPageHTML')
    async def get_page_html(self, pagename: str) -> str:
        '''Rendered XHTML body of a page.'''

    @remote('wiki.getPageHTMLVersion')
    async def get_page_html_version(self, pagename: str, version: int) -> str:
        '''Rendered XHTML body of a specific revision.'''

    @remote('wiki.putPage')
    async def put_page(self, pagename: str, raw: str,
                       attrs: shapes.PutAttributes) -> bool:
        '''
        Save a page. attrs may carry 'sum' (change summary) and 'minor'.
        Saving empty text deletes the page.
        '''

    @remote('wiki.listLinks')
    async def list_links(self, pagename: str) -> List[shapes.Link]:
        '''All links contained in a page.'''

    @remote('wiki.getAllPages')
    async def get_all_pages(self) -> List[shapes.PageListItem]:
        pass

    @remote('wiki.getBackLinks')
    async def get_back_links(self, pagename: str) -> List[str]:
        '''Ids of the pages linking to pagename.'''

    @remote('wiki.getRecentChanges')
    async def get_recent_changes(
            self, timestamp: int) -> List[shapes.RecentChange]:
        '''
        Pages changed since timestamp. Only the most recent change of each
        page is listed.
        '''

    @remote('wiki.getRecentMediaChanges')
    async def get_recent_media_changes(
            self, timestamp: int) -> List[shapes.RecentMediaChange]:
        pass

    @remote('wiki.getAttachments')
    async def get_attachments(self, namespace: str,
                              options: Dict[str, Any]) -> List[Dict[str, Any]]:
        '''Media files in a namespace. options go to search_media().'''

    @remote('wiki.getAttachment')
    async def get_attachment(self, id: str) -> bytes:
        '''Contents of a media file, sent base64 encoded.'''

    @remote('wiki.getAttachmentInfo')
    async def get_attachment_info(self, id: str) -> shapes.AttachmentInfo:
        pass

    @remote('wiki.putAttachment')
    async def put_attachment(self, id: str, data: bytes,
                             params: shapes.PutAttachmentParams) -> None:
        '''
        Upload a media file. Set params['ow'] to overwrite an existing file
        of the same id.
        '''

    @remote('wiki.deleteAttachment')
    async def delete_attachment(self, id: str) -> None:
        '''Fails on the server if a page still references the file.'''


class DokuwikiService(Service):
    '''DokuWiki specific methods.'''

    @remote('dokuwiki.getPagelist')
    async def get_pagelist(self, namespace: str,
                           options: Dict[str, Any]) -> List[shapes.PageListItem]:
        '''Pages within a namespace. options go to search_allpages().'''

    @remote('dokuwiki.getVersion')
    async def get_version(self) -> str:
        pass

    @remote('dokuwiki.getTime')
    async def get_time(self) -> int:
        '''Current unix time on the wiki server.'''

    @remote('dokuwiki.getXMLRPCAPIVersion')
    async def get_xmlrpc_api_version(self) -> int:
        '''
        DokuWiki's own API version, independent of
        wiki.getRPCVersionSupported.
        '''

    @remote('dokuwiki.login')
    async def login(self, user: str, password: str) -> bool:
        '''
        Log in and receive session cookies. The transport keeps them, so
        later calls on the same client are made as that user.
        '''

    @remote('dokuwiki.search')
    async def search(self, query: str) -> List[shapes.SearchResult]:
        '''
        Fulltext search. Snippets are included for the first 15 results.
        '''

    @remote('dokuwiki.getTitle')
    async def get_title(self) -> str:
        pass

    @remote('dokuwiki.appendPage')
    async def append_page(self, pagename: str, raw: str,
                          attrs: shapes.PutAttributes) -> bool:
        pass

    @remote('dokuwiki.setLocks')
    async def set_locks(self, pageids: shapes.LockRequest) -> shapes.LockResult:
        '''Lock and unlock a batch of pages at once.'''

    @remote('dokuwiki.createUser')
    async def create_user(self, params: shapes.CreateUserInput) -> bool:
        '''The server answers with a 400 range fault if it rejects params.'''

    @remote('dokuwiki.deleteUsers')
    async def delete_users(self, usernames: List[str]) -> bool:
        pass


class StructPluginService(Service):
    '''Methods of the struct plugin.'''

    @remote('plugin.struct.getData')
    async def get_data(self, page: str, schema: str = '',
                       timestamp: Optional[int] = None) -> shapes.StructData:
        '''
        Structured data of a page. An empty schema means all schemas,
        timestamp 0 means the current revision.
        '''

    @remote('plugin.struct.saveData')
    async def save_data(self, page: str, data: shapes.StructData,
                        summary: str) -> bool:
        '''Save data for a page, creating a new revision. Always True.'''


class DokuWiki:
    '''All catalogue services over one client.'''

    def __init__(self, client):
        self.client = client
        self.wiki = WikiService(client)
        self.dokuwiki = DokuwikiService(client)
        self.struct = StructPluginService(client)
