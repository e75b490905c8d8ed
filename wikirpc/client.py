import asyncio
import functools
import logging
import xmlrpc.client
from xml.parsers.expat import ExpatError

from . import auth
from .endpoint import parse_endpoint, userinfo
from .errors import TransportError, HTTPStatusError, ProtocolError
from .proxy import ServiceProxy
from .transport import create_transport

log = logging.getLogger(__name__)

USER_AGENT = 'wikirpc/0.1.0'


def _decode_response(body):
    '''
    Decode an XML-RPC response body into its single value.

    raises -- ProtocolError for a fault, TransportError if the body isn't a
    methodResponse.
    '''
    try:
        params, _ = xmlrpc.client.loads(body, use_builtin_types=True)
    except xmlrpc.client.Fault as fault:
        raise ProtocolError(fault.faultCode, fault.faultString) from None
    except (ExpatError, xmlrpc.client.ResponseError, ValueError,
            TypeError, KeyError, IndexError) as e:
        raise TransportError(
            "could not decode XML-RPC response: {}".format(e)) from e

    if len(params) != 1:
        raise TransportError(
            "XML-RPC response carried {} values, expected 1".format(
                len(params)))
    return params[0]


def _fault_in(body):
    if not body:
        return None
    try:
        xmlrpc.client.loads(body)
    except xmlrpc.client.Fault as fault:
        return fault
    except (ExpatError, xmlrpc.client.ResponseError, ValueError,
            TypeError, KeyError, IndexError):
        return None
    return None


class WikiRpcClient:
    '''
    Generic Wiki RPC Interface 2.0 client.

    One client is bound to one endpoint and one set of credentials. It keeps
    no state between calls, so it can be shared by concurrent tasks. Calls run
    in the event loop's default executor; the default transports give each
    executor thread its own requests.Session over one shared cookie jar, so
    no Session is used by two threads at once. A session handed to a
    transport by the caller is shared by all threads.

    Credentials written into the url (user:password@host) are used as
    basic_auth when neither basic_auth nor bearer_auth is given, and are
    never part of client.url.

    url -- XML-RPC endpoint, e.g. https://wiki.example.org/lib/exe/xmlrpc.php
    basic_auth -- (user, password) or {'user': ..., 'pass': ...}
    bearer_auth -- token string. Takes precedence over basic_auth.
    transport -- a ready transport; otherwise one is chosen from the scheme.
    timeout, verify -- handed to the transport, see wikirpc.transport.

    http://www.jspwiki.org/wiki/WikiRPCInterface2
    https://www.dokuwiki.org/devel:xmlrpc
    '''

    def __init__(self, url, basic_auth=None, bearer_auth=None,
                 transport=None, timeout=None, verify=True, user_agent=None):
        self.endpoint = parse_endpoint(url)
        if basic_auth is None and bearer_auth is None:
            basic_auth = userinfo(url)
        self.credentials = auth.from_options(basic_auth=basic_auth,
                                             bearer_auth=bearer_auth)
        self._auth = self.credentials.requests_auth()
        if transport is None:
            transport = create_transport(self.endpoint,
                                         timeout=timeout,
                                         verify=verify)
        self.transport = transport

        self._headers = {
            'Content-Type': 'text/xml',
            'User-Agent': user_agent or USER_AGENT,
        }

    @property
    def url(self):
        return self.endpoint.href

    @property
    def proxy(self):
        return ServiceProxy(self)

    def request_headers(self):
        return dict(self._headers)

    def _exchange(self, body):
        try:
            return self.transport.request(self.endpoint,
                                          body,
                                          self.request_headers(),
                                          auth=self._auth)
        except HTTPStatusError as e:
            # some servers send faults with an error status
            fault = _fault_in(e.body)
            if fault is not None:
                raise ProtocolError(fault.faultCode,
                                    fault.faultString) from None
            raise

    async def call(self, method_name, params=()):
        '''
        Call a remote method and return its decoded result.

        method_name -- e.g. 'wiki.getPage'
        params -- positional arguments, any XML-RPC representable values.

        raises -- ProtocolError if the server answered with a fault,
        TransportError if the exchange itself failed.
        '''
        if not isinstance(method_name, str) or not method_name:
            raise ValueError("method name must be a non-empty string, "
                             "got {!r}".format(method_name))

        body = xmlrpc.client.dumps(tuple(params),
                                   methodname=method_name,
                                   encoding='utf-8').encode('utf-8')

        log.debug('calling %s on %s', method_name, self.endpoint.href)
        loop = asyncio.get_running_loop()
        response = await loop.run_in_executor(
            None, functools.partial(self._exchange, body))
        return _decode_response(response)

    def close(self):
        self.transport.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        self.close()

    def __repr__(self):
        return '{}({!r}, credentials={!r})'.format(
            type(self).__name__, self.endpoint.href, self.credentials)
