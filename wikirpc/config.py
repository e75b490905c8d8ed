import os

from .endpoint import rpc_url
from .errors import ConfigurationError

'''
Settings for command line use, taken from options with WIKIRPC_* environment
variables underneath. The library itself only takes constructor arguments.
'''

ENVIRONMENT = {
    'url': 'WIKIRPC_URL',
    'user': 'WIKIRPC_USER',
    'password': 'WIKIRPC_PASSWORD',
    'token': 'WIKIRPC_TOKEN',
    'timeout': 'WIKIRPC_TIMEOUT',
    'verify': 'WIKIRPC_VERIFY',
}

FALSE_STRINGS = ('0', 'false', 'no', 'off')
TRUE_STRINGS = ('1', 'true', 'yes', 'on')


class Settings:
    def __init__(self, url=None, user=None, password=None, token=None,
                 timeout=None, verify=True):
        self.url = url
        self.user = user
        self.password = password
        self.token = token
        self.timeout = timeout
        self.verify = verify

    @classmethod
    def load(cls, options=None, environ=None):
        '''
        options -- mapping or argparse.Namespace; values that are None are
        taken from the environment instead.
        environ -- defaults to os.environ.
        '''
        if environ is None:
            environ = os.environ
        if options is None:
            options = {}
        elif not isinstance(options, dict):
            options = vars(options)

        values = {}
        for key, variable in ENVIRONMENT.items():
            value = options.get(key)
            if value is None:
                value = environ.get(variable) or None
            values[key] = value

        if values['timeout'] is not None:
            try:
                values['timeout'] = float(values['timeout'])
            except ValueError as e:
                raise ConfigurationError(
                    "timeout must be a number of seconds, got {!r}".format(
                        values['timeout'])) from e

        verify = values['verify']
        if verify is None:
            values['verify'] = True
        elif isinstance(verify, str):
            lowered = verify.strip().lower()
            if lowered in FALSE_STRINGS:
                values['verify'] = False
            elif lowered in TRUE_STRINGS:
                values['verify'] = True
            # anything else is a CA bundle path

        return cls(**values)

    def client_options(self):
        '''Keyword arguments for WikiRpcClient.'''
        if not self.url:
            raise ConfigurationError(
                "no wiki url given, pass one or set {}".format(
                    ENVIRONMENT['url']))

        kwargs = {
            'url': rpc_url(self.url),
            'timeout': self.timeout,
            'verify': self.verify,
        }
        if self.token:
            kwargs['bearer_auth'] = self.token
        elif self.user:
            kwargs['basic_auth'] = (self.user, self.password or '')
        return kwargs

    def __repr__(self):
        return 'Settings(url={!r}, user={!r})'.format(self.url, self.user)
