'''
Attribute and item access as remote calls.

>>> proxy = client.proxy
>>> await proxy['wiki.getPage']('start')
>>> await proxy.wiki.getPage('start')

Both are the same as client.call('wiki.getPage', ['start']).
'''


class RemoteMethod:
    def __init__(self, client, name):
        self._client = client
        self._name = name

    @property
    def name(self):
        return self._name

    def __getattr__(self, name):
        if name.startswith('_'):
            raise AttributeError(name)
        return RemoteMethod(self._client, '{}.{}'.format(self._name, name))

    def __call__(self, *args):
        return self._client.call(self._name, list(args))

    def __repr__(self):
        return '<RemoteMethod {}>'.format(self._name)


class ServiceProxy:
    def __init__(self, client):
        self._client = client

    def __getitem__(self, name):
        return RemoteMethod(self._client, name)

    def __getattr__(self, name):
        if name.startswith('_'):
            raise AttributeError(name)
        return RemoteMethod(self._client, name)

    def __repr__(self):
        return '<ServiceProxy for {}>'.format(self._client.url)
