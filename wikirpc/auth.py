import collections
import collections.abc
import logging

from requests.auth import AuthBase, HTTPBasicAuth

from .errors import ConfigurationError

'''
Credentials a client sends with every call. Exactly one of NoAuth, BasicAuth
or BearerAuth is in effect for a client. Each turns into a requests auth
object, so requests applies it ahead of anything it would find in the url or
in ~/.netrc.

>>> BasicAuth('a', 'b').requests_auth()
<requests.auth.HTTPBasicAuth object at ...>
>>> BearerAuth('tok').requests_auth()
<wikirpc.auth.HTTPBearerAuth object at ...>
'''

log = logging.getLogger(__name__)


class HTTPBearerAuth(AuthBase):
    '''Sets "Authorization: Bearer <token>" on a request.'''

    def __init__(self, token):
        self.token = token

    def __eq__(self, other):
        return self.token == getattr(other, 'token', None)

    def __ne__(self, other):
        return not self == other

    def __call__(self, r):
        r.headers['Authorization'] = 'Bearer ' + self.token
        return r


class NoAuth(collections.namedtuple('NoAuth', [])):
    def requests_auth(self):
        return None


class BasicAuth(collections.namedtuple('BasicAuth', ['user', 'password'])):
    def requests_auth(self):
        # bytes, so requests sends utf-8 rather than latin-1
        return HTTPBasicAuth(self.user.encode('utf-8'),
                             self.password.encode('utf-8'))

    def __repr__(self):
        return 'BasicAuth(user={!r}, password=***)'.format(self.user)


class BearerAuth(collections.namedtuple('BearerAuth', ['token'])):
    def requests_auth(self):
        return HTTPBearerAuth(self.token)

    def __repr__(self):
        return 'BearerAuth(token=***)'


def _basic_from_option(basic_auth):
    '''
    basic_auth -- a (user, password) pair, a BasicAuth, or a mapping with
    'user' and 'pass' (or 'password') keys.
    '''
    if isinstance(basic_auth, BasicAuth):
        user, password = basic_auth
    elif isinstance(basic_auth, collections.abc.Mapping):
        user = basic_auth.get('user')
        password = basic_auth.get('pass', basic_auth.get('password'))
    elif isinstance(basic_auth, (str, bytes)):
        raise ConfigurationError(
            "basic_auth must be a (user, password) pair, not a string")
    else:
        try:
            user, password = basic_auth
        except (TypeError, ValueError) as e:
            raise ConfigurationError(
                "basic_auth must be a (user, password) pair or a mapping "
                "with 'user' and 'pass' keys") from e

    if not user:
        raise ConfigurationError("basic_auth has no user")
    if password is None:
        password = ''
    return BasicAuth(str(user), str(password))


def from_options(basic_auth=None, bearer_auth=None):
    '''
    Resolve the constructor's credential options into one credential.

    If both forms are given the bearer token wins and basic_auth is ignored.
    '''
    if bearer_auth is not None:
        if isinstance(bearer_auth, BearerAuth):
            bearer_auth = bearer_auth.token
        if not isinstance(bearer_auth, str) or not bearer_auth:
            raise ConfigurationError("bearer_auth must be a non-empty string")
        if basic_auth is not None:
            log.warning('both basic_auth and bearer_auth given, '
                        'using the bearer token')
        return BearerAuth(bearer_auth)

    if basic_auth is not None:
        return _basic_from_option(basic_auth)

    return NoAuth()
