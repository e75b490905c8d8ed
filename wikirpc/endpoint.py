import collections
import re
from urllib.parse import unquote, urlsplit, urlunsplit

from .errors import ConfigurationError

'''
Parsing of the URL a client talks to.

>>> parse_endpoint('https://wiki.example.org/lib/exe/xmlrpc.php')
Endpoint(scheme='https', host='wiki.example.org', port=443, path='/lib/exe/xmlrpc.php', href='https://wiki.example.org/lib/exe/xmlrpc.php')
'''

RPC_PATH = '/lib/exe/xmlrpc.php'

DEFAULT_PORTS = {
    'http': 80,
    'https': 443,
}

USERINFO = re.compile(r'(//)[^/]*@')


class Endpoint(collections.namedtuple(
        'Endpoint', ['scheme', 'host', 'port', 'path', 'href'])):

    @property
    def secure(self):
        return self.scheme == 'https'


def _redacted(url):
    return USERINFO.sub(r'\1***@', url)


def parse_endpoint(url):
    '''
    parse_endpoint : string -> Endpoint

    Only https is treated as secure; every other scheme takes the plain path.
    Any user:password@ part is left out of the endpoint, see userinfo().

    raises -- ConfigurationError if the url has no scheme or host, or a port
    that isn't a number.
    '''
    if not isinstance(url, str) or not url.strip():
        raise ConfigurationError("endpoint url must be a non-empty string, "
                                 "got {!r}".format(url))
    try:
        parts = urlsplit(url.strip())
        port = parts.port
    except ValueError as e:
        raise ConfigurationError(
            "could not parse endpoint url {!r}".format(_redacted(url))) from e

    scheme = parts.scheme.lower()
    if not scheme:
        raise ConfigurationError(
            "no scheme in endpoint url {!r}".format(_redacted(url)))
    if not parts.hostname:
        raise ConfigurationError(
            "no host in endpoint url {!r}".format(_redacted(url)))

    if port is None:
        port = DEFAULT_PORTS.get(scheme, DEFAULT_PORTS['http'])

    hostport = parts.netloc.rpartition('@')[2]
    return Endpoint(scheme=scheme,
                    host=parts.hostname,
                    port=port,
                    path=parts.path or '/',
                    href=urlunsplit((scheme, hostport, parts.path,
                                     parts.query, parts.fragment)))


def userinfo(url):
    '''
    userinfo : string -> (user, password) or None

    The credentials written into a url as user:password@host, decoded.
    '''
    parts = urlsplit(url.strip())
    if not parts.username:
        return None
    return unquote(parts.username), unquote(parts.password or '')


def rpc_url(base):
    '''
    Given the base address of a DokuWiki, return the address of its XML-RPC
    endpoint. Addresses that already point at xmlrpc.php come back untouched.
    '''
    base = base.strip()
    if urlsplit(base).path.endswith('xmlrpc.php'):
        return base
    return base.rstrip('/') + RPC_PATH
