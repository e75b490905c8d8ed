#!/usr/bin/env python3
import argparse
import asyncio
import getpass
import json
import logging
import sys

from wikirpc import DokuWiki, WikiRpcClient, WikiRpcError
from wikirpc.config import Settings

'''
Command line access to a DokuWiki over XML-RPC.

    dokuwiki --url https://wiki.example.org get start > start.txt
    dokuwiki --url https://wiki.example.org --login put start start.txt
    WIKIRPC_URL=https://wiki.example.org dokuwiki search "open vswitch"

The url may be the base of the wiki, /lib/exe/xmlrpc.php is added to it.
'''

log = logging.getLogger('dokuwiki')

READ_ACTIONS = ('get', 'html', 'info', 'links', 'backlinks', 'search', 'list',
                'version', 'title', 'time')
WRITE_ACTIONS = ('put', 'append')
NEEDS_PAGE = ('get', 'html', 'info', 'links', 'backlinks', 'search', 'put',
              'append')


def show(value, out):
    if isinstance(value, str):
        out.write(value)
        if not value.endswith('\n'):
            out.write('\n')
    else:
        out.write(json.dumps(value, indent=2, default=str))
        out.write('\n')


async def run_action(wiki, action, page, summary, input_file):
    if action == 'get':
        return await wiki.wiki.get_page(page)
    elif action == 'html':
        return await wiki.wiki.get_page_html(page)
    elif action == 'info':
        return await wiki.wiki.get_page_info(page)
    elif action == 'links':
        return await wiki.wiki.list_links(page)
    elif action == 'backlinks':
        return await wiki.wiki.get_back_links(page)
    elif action == 'search':
        return await wiki.dokuwiki.search(page)
    elif action == 'list':
        return await wiki.dokuwiki.get_pagelist(page or '', {})
    elif action == 'version':
        return await wiki.dokuwiki.get_version()
    elif action == 'title':
        return await wiki.dokuwiki.get_title()
    elif action == 'time':
        return await wiki.dokuwiki.get_time()

    wikitext = input_file.read()
    attrs = {}
    if summary:
        attrs['sum'] = summary
    if action == 'put':
        return await wiki.wiki.put_page(page, wikitext, attrs)
    return await wiki.dokuwiki.append_page(page, wikitext, attrs)


async def main(settings, action, page, login, summary, input_file,
               output_file):
    async with WikiRpcClient(**settings.client_options()) as client:
        wiki = DokuWiki(client)

        if login:
            username = settings.user or input('username > ')
            password = settings.password or getpass.getpass('password > ')
            if not await wiki.dokuwiki.login(username, password):
                log.error('could not log in as %s', username)
                return 1
            log.info('logged in as %s', username)

        result = await run_action(wiki, action, page, summary, input_file)
        if action in WRITE_ACTIONS:
            if not result:
                log.error('%s of %s was refused', action, page)
                return 1
        else:
            show(result, output_file)
    return 0


def parse_args(argv):
    parser = argparse.ArgumentParser(
        description='Read and write DokuWiki pages over XML-RPC')
    parser.add_argument('--url',
                        default=None,
                        help='wiki base url or xmlrpc.php url '
                             '(default $WIKIRPC_URL)')
    parser.add_argument('--user',
                        default=None,
                        help='user for HTTP basic auth and --login '
                             '(default $WIKIRPC_USER)')
    parser.add_argument('--password',
                        default=None,
                        help='password (default $WIKIRPC_PASSWORD)')
    parser.add_argument('--token',
                        default=None,
                        help='bearer token, wins over --user '
                             '(default $WIKIRPC_TOKEN)')
    parser.add_argument('--login',
                        action='store_true',
                        default=False,
                        help='call dokuwiki.login first, prompting for '
                             'whatever credentials are missing')
    parser.add_argument('--timeout',
                        default=None,
                        help='seconds to wait for the wiki')
    parser.add_argument('--insecure',
                        dest='verify',
                        action='store_const',
                        const=False,
                        default=None,
                        help='do not verify TLS certificates')
    parser.add_argument('--summary',
                        default='',
                        help='change summary for put and append')
    parser.add_argument('-v', '--verbose',
                        action='store_true',
                        default=False)
    parser.add_argument('action', choices=READ_ACTIONS + WRITE_ACTIONS)
    parser.add_argument('page', nargs='?', default=None,
                        help='page id, namespace for list, query for search')
    parser.add_argument('file', nargs='?', default='',
                        help='read wiki text from (put, append) or write the '
                             'result to this file instead of stdin/stdout')
    params = parser.parse_args(argv)
    if params.action in NEEDS_PAGE and not params.page:
        parser.error('{} needs a page'.format(params.action))
    return params


def cli(argv=None):
    params = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if params.verbose else logging.INFO,
        format='%(levelname)s %(message)s')

    try:
        settings = Settings.load(params)
        if params.action in WRITE_ACTIONS:
            i = open(params.file, 'r') if params.file else sys.stdin
            o = sys.stdout
        else:
            i = sys.stdin
            o = open(params.file, 'w') if params.file else sys.stdout

        try:
            return asyncio.run(main(settings=settings,
                                    action=params.action,
                                    page=params.page,
                                    login=params.login,
                                    summary=params.summary,
                                    input_file=i,
                                    output_file=o))
        finally:
            for f in (i, o):
                if f not in (sys.stdin, sys.stdout):
                    f.close()
    except (WikiRpcError, OSError) as e:
        log.error('%s', e)
        return 1


if __name__ == '__main__':
    raise SystemExit(cli())
