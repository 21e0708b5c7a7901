import sys
import logging
import argparse
from importlib import metadata
from pathlib import Path

from . import config, pool, generator, clipboard

VERSION_FILE = Path(__file__).parent.parent / 'VERSION'


def get_version():
    try:
        return metadata.version("memphrase")
    except metadata.PackageNotFoundError:
        return VERSION_FILE.read_text().strip()


def run_generate(long, syll, quiet, suffix, sep, wordlist):
    cfg = config.resolve(long=long, syll=syll, sep=sep,
                         suffix=suffix, quiet=quiet)
    units = pool.load_pool(cfg.unit, wordlist)
    passphrase = generator.generate(units, cfg)
    clipboard.OutputSink().emit(passphrase, quiet=cfg.quiet)


def parse_args(argv=None):
    """Process command line args.

    Values from config file become defaults, command line wins.

    """
    # First pass: only find the config file
    ap_config = argparse.ArgumentParser(add_help=False)
    ap_config.add_argument('-c', '--config', dest='config_file',
                           default=config.DEFAULT_CONFIG_FILE)
    args, _ = ap_config.parse_known_args(argv)
    settings = config.Settings(args.config_file)

    ap = argparse.ArgumentParser(prog="memphrase",
                                 description="Generate a memorable passphrase "
                                             "and copy it to clipboard",
                                 parents=[ap_config],
                                 formatter_class=argparse.RawTextHelpFormatter)
    ap.add_argument('--long', action=argparse.BooleanOptionalAction, default=False,
                    help="generate a long (>128bit security) passphrase")
    ap.add_argument('--syll', action=argparse.BooleanOptionalAction, default=False,
                    help="generate a passphrase with syllables, "
                         "rather than whole words")
    ap.add_argument('--quiet', action=argparse.BooleanOptionalAction, default=False,
                    help="quiet mode: copy to clipboard without displaying")
    ap.add_argument('--suffix', nargs='?', default='',
                    const=config.DEFAULT_SUFFIX,
                    help="include a suffix to satisfy strength meters, "
                         f"default is {config.DEFAULT_SUFFIX!r}")
    ap.add_argument('--sep', default=None,
                    help="separator to use between words or syllables\n"
                         "(default: space for words, nothing for syllables)")
    ap.add_argument('-w', '--wordlist', default=None,
                    help="use this word list instead of system or bundled words")
    ap.add_argument('-v', '--verbose', action='store_true',
                    help="report rejected (too short) draws on stderr,\n"
                         "they are not shown by default")
    ap.add_argument('--version', action='version',
                    version=f"%(prog)s {get_version()}")
    ap.set_defaults(**settings.defaults())

    args = ap.parse_args(args=argv)
    delattr(args, 'config_file')
    return args


def main(argv=None):
    """Main program

    :param argv: Used in tests. Default is sys.argv
    :return: Exit code
    """
    try:
        args = parse_args(argv)
    except config.ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    verbose = args.verbose
    delattr(args, 'verbose')
    logging.basicConfig(format='%(message)s',
                        level=logging.INFO if verbose else logging.WARNING)
    try:
        run_generate(**vars(args))
    except (config.ConfigurationError, pool.PoolError,
            clipboard.ClipboardError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0
