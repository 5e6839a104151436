"""Command line interface for classical_ciphers."""

import logging
import sys

import click

from . import __version__
from .dispatcher import CipherDispatcher, CipherMode
from .result import Direction

EXIT_INVALID_KEY = 2

_MODES = [m.value for m in CipherMode]


@click.group()
@click.version_option(__version__)
@click.option('--log-level', envvar='CLASSICAL_CIPHERS_LOG_LEVEL', default='WARNING',
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              show_default=True, help='Logging level for diagnostics written to stderr.')
def cli(log_level):
    """Caesar / Vigenère encryption and decryption."""
    logging.basicConfig(level=getattr(logging, log_level.upper()),
                        format='%(levelname)s %(name)s: %(message)s',
                        stream=sys.stderr)


def _cipher_options(fn):
    fn = click.option('--quiet', '-q', is_flag=True, default=False,
                      help='Print only the result, without the status label.')(fn)
    fn = click.option('--key', '-k', default=None,
                      help='Vigenère keyword (letters only).')(fn)
    fn = click.option('--shift', '-s', type=int, default=0, show_default=True,
                      help='Caesar shift; any integer.')(fn)
    fn = click.option('--mode', '-m', envvar='CLASSICAL_CIPHERS_MODE',
                      type=click.Choice(_MODES, case_sensitive=False),
                      default=CipherMode.CAESAR.value, show_default=True,
                      help='Cipher to use.')(fn)
    fn = click.argument('text')(fn)
    return fn


def _run(text, mode, shift, key, quiet, direction):
    if text == '-':
        text = click.get_text_stream('stdin').read()
    dispatcher = CipherDispatcher(mode)
    if dispatcher.mode is CipherMode.VIGENERE:
        if key is None:
            raise click.UsageError("--key is required with --mode vigenere")
        key_or_shift = key
    else:
        key_or_shift = shift

    result = dispatcher.transform(text, key_or_shift, direction)
    if quiet:
        click.echo(result.text)
    else:
        click.echo(f"{dispatcher.status_label(direction)}: {result.text}")
    if not result.ok:
        sys.exit(EXIT_INVALID_KEY)


@cli.command()
@_cipher_options
def encrypt(text, mode, shift, key, quiet):
    """Encrypt TEXT ('-' reads stdin)."""
    _run(text, mode, shift, key, quiet, Direction.ENCRYPT)


@cli.command()
@_cipher_options
def decrypt(text, mode, shift, key, quiet):
    """Decrypt TEXT ('-' reads stdin)."""
    _run(text, mode, shift, key, quiet, Direction.DECRYPT)


def main():
    cli()


if __name__ == '__main__':
    main()
