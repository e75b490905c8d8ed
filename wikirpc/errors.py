class WikiRpcError(RuntimeError):
    pass


class ConfigurationError(WikiRpcError):
    pass


class TransportError(WikiRpcError):
    '''
    The network exchange with the wiki failed, or what came back could not be
    decoded as an XML-RPC response.
    '''
    pass


class HTTPStatusError(TransportError):
    def __init__(self, url, status_code, body=b''):
        self.url = url
        self.status_code = status_code
        self.body = body
        super().__init__(
            "{} answered HTTP {}".format(url, status_code))


class ProtocolError(WikiRpcError):
    '''
    The wiki answered with an XML-RPC fault.

    code -- integer fault code chosen by the server.
    message -- the fault string.
    '''
    def __init__(self, code, message):
        self.code = code
        self.message = message
        super().__init__(code, message)

    def __str__(self):
        return "XML-RPC fault {}: {}".format(self.code, self.message)
