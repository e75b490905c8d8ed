import unittest

from wikirpc.client import WikiRpcClient
from wikirpc.client_test import (StubTransport, response_body,
                                 decode_request, URL)
from wikirpc.proxy import ServiceProxy, RemoteMethod


class TestServiceProxy(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.stub = StubTransport(response_body('Hello'))
        self.client = WikiRpcClient(URL, basic_auth=('a', 'b'),
                                    transport=self.stub)

    async def test_item_access_matches_call(self):
        self.assertEqual(await self.client.proxy['wiki.getPage']('Start'),
                         'Hello')
        self.assertEqual(await self.client.call('wiki.getPage', ['Start']),
                         'Hello')

        via_proxy, via_call = self.stub.requests
        self.assertEqual(via_proxy, via_call)

    async def test_attribute_access(self):
        await self.client.proxy.plugin.struct.getData('start', '', 0)
        self.assertEqual(decode_request(self.stub.requests[0][1]),
                         ('plugin.struct.getData', ['start', '', 0]))

    async def test_argument_order_kept(self):
        await self.client.proxy['wiki.putPage']('start', 'text', {'sum': 's'})
        self.assertEqual(decode_request(self.stub.requests[0][1]),
                         ('wiki.putPage', ['start', 'text', {'sum': 's'}]))

    def test_private_names_are_not_remote(self):
        proxy = ServiceProxy(self.client)
        with self.assertRaises(AttributeError):
            proxy._secret
        with self.assertRaises(AttributeError):
            proxy.wiki.__wrapped__

    def test_names(self):
        method = self.client.proxy.dokuwiki.getVersion
        self.assertIsInstance(method, RemoteMethod)
        self.assertEqual(method.name, 'dokuwiki.getVersion')
        self.assertIn('dokuwiki.getVersion', repr(method))


if __name__ == '__main__':
    unittest.main()
