'''
Client for the WikiRPC2 / DokuWiki XML-RPC interface.

>>> async with WikiRpcClient('https://wiki.example.org/lib/exe/xmlrpc.php',
...                          basic_auth=('me', 'secret')) as client:
...     wiki = DokuWiki(client)
...     text = await wiki.wiki.get_page('start')

https://www.dokuwiki.org/devel:xmlrpc
'''
from .errors import (WikiRpcError, ConfigurationError, TransportError,
                     HTTPStatusError, ProtocolError)
from .auth import NoAuth, BasicAuth, BearerAuth
from .endpoint import Endpoint, parse_endpoint, rpc_url
from .client import WikiRpcClient
from .proxy import ServiceProxy
from .catalogue import (CATALOGUE, DokuWiki, WikiService, DokuwikiService,
                        StructPluginService)

__version__ = '0.1.0'

__all__ = [
    'WikiRpcError', 'ConfigurationError', 'TransportError', 'HTTPStatusError',
    'ProtocolError', 'NoAuth', 'BasicAuth', 'BearerAuth', 'Endpoint',
    'parse_endpoint', 'rpc_url', 'WikiRpcClient', 'ServiceProxy', 'CATALOGUE',
    'DokuWiki', 'WikiService', 'DokuwikiService', 'StructPluginService',
]
