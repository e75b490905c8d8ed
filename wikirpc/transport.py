import logging
import threading

import requests

from .errors import TransportError, HTTPStatusError

'''
HTTP(S) exchange for XML-RPC bodies, built on requests. Every thread that
sends through a transport gets its own requests.Session, and all of them
share one cookie jar, so the cookies DokuWiki sets on dokuwiki.login apply to
every later call through the same transport.
'''

log = logging.getLogger(__name__)


class Transport:
    '''
    Plain HTTP transport.

    timeout -- seconds, passed to requests unchanged. None waits forever.
    session -- a requests.Session to use for every request instead of one
    per thread. The caller is then responsible for its thread safety.
    '''
    secure = False

    def __init__(self, timeout=None, session=None):
        self.timeout = timeout
        self.cookies = requests.cookies.RequestsCookieJar()
        self._session = session
        self._local = threading.local()
        self._sessions = []
        self._lock = threading.Lock()

    @property
    def session(self):
        if self._session is not None:
            return self._session
        session = getattr(self._local, 'session', None)
        if session is None:
            session = requests.Session()
            session.cookies = self.cookies
            self._local.session = session
            with self._lock:
                self._sessions.append(session)
        return session

    @session.setter
    def session(self, session):
        self._session = session

    def _request_kwargs(self):
        return {'timeout': self.timeout}

    def request(self, endpoint, body, headers, auth=None):
        '''
        POST body to the endpoint, returning the raw response body.

        auth -- a requests auth object. When given it is the only credential
        sent; requests does not fall back to ~/.netrc for it.

        raises -- TransportError on any network failure,
        HTTPStatusError if the response code is not 2xx.
        '''
        try:
            response = self.session.post(endpoint.href,
                                         data=body,
                                         headers=headers,
                                         auth=auth,
                                         **self._request_kwargs())
        except requests.RequestException as e:
            raise TransportError(
                "request to {} failed: {}".format(endpoint.href, e)) from e

        log.debug('%s answered %s', endpoint.href, response.status_code)
        if not (200 <= response.status_code <= 299):
            raise HTTPStatusError(endpoint.href,
                                  response.status_code,
                                  response.content)
        return response.content

    def close(self):
        with self._lock:
            sessions, self._sessions = self._sessions, []
        if self._session is not None:
            sessions.append(self._session)
        for session in sessions:
            session.close()


class SecureTransport(Transport):
    '''
    HTTPS transport.

    verify -- passed to requests: True, False, or a CA bundle path.
    '''
    secure = True

    def __init__(self, timeout=None, session=None, verify=True):
        super().__init__(timeout=timeout, session=session)
        self.verify = verify

    def _request_kwargs(self):
        kwargs = super()._request_kwargs()
        kwargs['verify'] = self.verify
        return kwargs


def create_transport(endpoint, timeout=None, verify=True, session=None):
    '''
    Pick the transport for an endpoint: SecureTransport for https,
    Transport for anything else.
    '''
    if endpoint.secure:
        return SecureTransport(timeout=timeout, session=session, verify=verify)
    return Transport(timeout=timeout, session=session)
