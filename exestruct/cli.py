'''
Command line interface to the library.

The commands are chained and executed in order against the same session,
so it's possible to do something like

    $ exestruct.py open DAVE.EXE set -a game.initial.level 3 save DAVE.EXE
'''
import logging
import os
import sys

from . import default_registry
from .attributes import sorted_attributes
from .exceptions import ExestructException


logger = logging.getLogger(__name__)


USAGE = '''Use: %(progname)s --formats | [command1 [command2...]]

Options:

  --formats
    List all available file formats.

Commands:

  identify <file>
    Read local <file> and try to work out what executable format it is in.

  list | ls | dir
    Show all attributes in current executable.

  open [-f format] <file>
    Open the local <file> as an executable, autodetecting the format unless -f
    is given.  Use --formats for a list of possible values.

  set -a <id> <value>
    Change the value of the attribute <id>, integers accept the 0x prefix.

  show <id>
    Print the value of the attribute <id>.

  save [-f format] <file>
    Save the attributes to <file>, together with any supplementary file
    required by the format.

Examples:

  %(progname)s open DAVE.EXE list
  %(progname)s open DAVE.EXE set -a default.hsc.1.name ABC save DAVE.EXE
'''


class OperationsError(Exception):
    '''A problem caused by the user, shown without stack trace'''
    pass


def find_file(path):
    '''Return the path of an existing file matching "path" with the
    filename compared case-insensitively, None if there isn't one.'''
    if os.path.exists(path):
        return path

    directory, name = os.path.split(path)
    try:
        entries = os.listdir(directory or '.')
    except OSError:
        return None

    for entry in entries:
        if entry.lower() == name.lower():
            return os.path.join(directory, entry)

    return None


def read_file(path):
    with open(path, 'rb') as f:
        return f.read()


def write_file(path, data):
    with open(path, 'wb') as f:
        f.write(data)


class Operations(object):
    '''Each command is a method with the same name receiving the
    dictionary of its parameters.'''

    # command -> (options, positional parameters)
    names = {
        'identify': ({}, ['target']),
        'list': ({}, []),
        'open': ({'-f': 'format'}, ['target']),
        'set': ({'-a': 'attribute'}, ['value']),
        'show': ({}, ['attribute']),
        'save': ({'-f': 'format'}, ['target']),
    }

    aliases = {
        'dir': 'list',
        'ls': 'list',
    }

    def __init__(self, registry=default_registry):
        self.registry = registry
        self.handler = None
        self.content = None
        self.attributes = None

    def load_supps(self, handler, target, main):
        '''Build the content bundle for the handler reading the supplementary
        files from the directory of the target.'''
        content = {'main': main}

        directory, name = os.path.split(target)
        supps = handler.supps(name, main) or {}

        for supp_id, filename in supps.items():
            wanted = os.path.join(directory, filename)
            path = find_file(wanted)
            if path is None:
                raise OperationsError(f'open: unable to open supplementary file "{wanted}"')

            logger.debug('loading supplementary file %s as \'%s\'', path, supp_id)
            content[supp_id] = read_file(path)

        return content

    def _read_target(self, command, params):
        target = params.get('target')
        if not target:
            raise OperationsError(f'{command}: missing filename')

        try:
            return read_file(target)
        except OSError as e:
            raise OperationsError(f'{command}: unable to open "{target}": {e.strerror}')

    def _get_format(self, command, params):
        format_id = params.get('format')
        if format_id is None:
            return None

        handler = self.registry.get_handler(format_id)
        if handler is None:
            raise OperationsError(f'{command}: invalid format code: {format_id}')

        return handler

    def _get_attribute(self, command, attribute_id):
        if self.attributes is None:
            raise OperationsError(f'{command}: no file open, use the open command first')

        if not attribute_id:
            raise OperationsError(f'{command}: missing attribute id')

        attribute = self.attributes.get(attribute_id)
        if attribute is None:
            raise OperationsError(f'{command}: unknown attribute \'{attribute_id}\'')

        return attribute

    def identify(self, params):
        main = self._read_target('identify', params)

        print('Autodetecting file format...')
        handlers = self.registry.find_handler(main)

        print(f'{len(handlers)} format handler(s) matched')
        if not handlers:
            print('No file format handlers were able to identify this file format, sorry.')
            return

        for handler in handlers:
            metadata = handler.metadata()
            print(f'\n>> Trying handler for {metadata.id} ({metadata.title})')

            try:
                content = self.load_supps(handler, params['target'], main)
            except OperationsError as e:
                print(f' - Skipping format due to error loading additional files required:\n   {e}')
                continue

            try:
                attributes = handler.extract(content)
            except ExestructException as e:
                print(f' - Handler failed to open file: {e}')
                continue

            print(f' - Handler reports executable contains {len(attributes)} attributes.')

    def open(self, params):
        handler = self._get_format('open', params)
        main = self._read_target('open', params)

        if handler is None:
            handlers = self.registry.find_handler(main)
            if not handlers:
                raise OperationsError('open: unable to identify this executable format.')

            if len(handlers) > 1:
                print('This file format could not be unambiguously identified.  It could be:', file=sys.stderr)
                for candidate in handlers:
                    metadata = candidate.metadata()
                    print(f' * {metadata.id} ({metadata.title})', file=sys.stderr)
                raise OperationsError('open: please use the -f option to specify the format.')

            handler = handlers[0]

        content = self.load_supps(handler, params['target'], main)
        self.attributes = handler.extract(content)
        self.content = content
        self.handler = handler

        logger.info('opened %s as %s', params['target'], handler.id)

    def list(self, params):
        if self.attributes is None:
            raise OperationsError('list: no file open, use the open command first')

        for attribute in sorted_attributes(self.attributes):
            comment = f'  // {attribute.desc}' if attribute.desc else ''
            print(f'{attribute.id}: "{attribute.value}"{comment}')

    def set(self, params):
        attribute = self._get_attribute('set', params.get('attribute'))

        text = params.get('value')
        if text is None:
            raise OperationsError(f'set: missing value for \'{attribute.id}\'')

        try:
            value = attribute.parse(text)
        except ValueError:
            raise OperationsError(f'set: invalid value "{text}" for \'{attribute.id}\'')

        if not attribute.in_range(value):
            logger.warning(
                'value %s for \'%s\' is outside the expected range [%s, %s]',
                value, attribute.id, attribute.min, attribute.max)

        attribute.value = value

    def show(self, params):
        attribute = self._get_attribute('show', params.get('attribute'))
        print(attribute.value)

    def save(self, params):
        if self.attributes is None:
            raise OperationsError('save: no file open, use the open command first')

        target = params.get('target')
        if not target:
            raise OperationsError('save: missing filename')

        handler = self._get_format('save', params) or self.handler

        print(f'Saving to {target} as {handler.id}', file=sys.stderr)
        content = handler.patch(self.content, self.attributes)

        directory, name = os.path.split(target)
        supps = handler.supps(name, content['main']) or {}

        missing = [_ for _ in supps if _ not in content]
        if missing:
            raise OperationsError(f'save: supplementary file "{missing[0]}" was not loaded')

        for supp_id, filename in supps.items():
            path = os.path.join(directory, filename)
            print(f' - Saving supplemental file {path}', file=sys.stderr)
            write_file(path, content[supp_id])

        write_file(target, content['main'])

        self.content = content


def parse_params(definition, argv):
    '''Consume from argv the parameters of a command, return them
    together with what remains of argv.'''
    options, positionals = definition
    positionals = list(positionals)

    params = {}
    while argv:
        token = argv[0]

        if token in options:
            if len(argv) < 2:
                raise OperationsError(f'missing value for the option {token}')
            params[options[token]] = argv[1]
            argv = argv[2:]
        elif positionals:
            params[positionals.pop(0)] = token
            argv = argv[1:]
        else:
            break

    return params, argv


def list_formats(registry):
    for handler in registry.list_handlers():
        metadata = handler.metadata()
        print(f'{metadata.id}: {metadata.title}')
        for name, desc in (metadata.params or {}).items():
            print(f'  * {name}: {desc}')


def main(argv, registry=default_registry):
    '''Run the commands in argv (argv[0] is the program name) and return
    the exit code.'''
    progname, argv = os.path.basename(argv[0]), list(argv[1:])

    if not argv or argv[0] in ('--help', '-h'):
        print(USAGE % {'progname': progname})
        return 0

    if argv[0] == '--formats':
        list_formats(registry)
        return 0

    operations = Operations(registry=registry)
    while argv:
        name, argv = argv[0], argv[1:]
        command = Operations.aliases.get(name, name)

        definition = Operations.names.get(command)
        if definition is None:
            print(f'Unknown command: {name}', file=sys.stderr)
            return 1

        try:
            params, argv = parse_params(definition, argv)
            getattr(operations, command)(params)
        except OperationsError as e:
            print(e, file=sys.stderr)
            return 2

    return 0
