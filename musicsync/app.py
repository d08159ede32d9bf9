'''
CLI application for synchronizing music files into the library
'''


import os
import sys
from argparse import ArgumentParser

from musicsync import DEFAULT_CONFIG
from musicsync.config import load_config, load_encoder_profile
from musicsync.errors import ConfigError, UsageError
from musicsync.library import Library
from musicsync.log import setup_logging
from musicsync.preview import preview
from musicsync.queue import BatchRunner


import logging
log = logging.getLogger(__name__)


ACTIONS = ('sync', 'preview')



def run(*a, **ka):
    '''
    CLI entry point
    '''
    # 1. Load main config and encoder profile from TOML
    # 2. Find music files with usable metadata
    # 3. Either show the plan (preview) or concurrently process each file:
    #    - Decide between transcoding and copying
    #    - Put the result into the library
    parser = make_parser()
    try:
        args = parse_args(*a, parser=parser, **ka)
    except UsageError as e:
        parser.print_usage(sys.stderr)
        print('{}: error: {}'.format(parser.prog, e), file=sys.stderr)
        sys.exit(2)

    logger = setup_logging(args.log_file, verbose=args.verbose)
    try:
        job = SyncJob(
            args.config,
            args.encoders,
            jobs=args.jobs,
            timeout=args.timeout,
            logger=logger,
        )
        print('Looking for music in: {}'.format(args.directory))
        if args.action == 'preview':
            job.preview(args.directory)
        elif args.action == 'sync':
            report = job.sync(args.directory)
            if report.failed:
                sys.exit(1)
    except ConfigError as e:
        logger.error(str(e))
        print('Configuration error: {}'.format(e), file=sys.stderr)
        sys.exit(1)



class SyncArgumentParser(ArgumentParser):
    def error(self, message):
        raise UsageError(message)



def make_parser(prog=None):
    parser = SyncArgumentParser(
        description='Copy or transcode music files into a library organized by tags',
        prog=prog,
    )
    parser.add_argument(
        'action',
        type=str.lower,
        choices=ACTIONS,
        help='What to do: {}'.format(', '.join(ACTIONS)),
    )
    parser.add_argument(
        'directory',
        help='Directory with source music files',
    )
    parser.add_argument(
        '--config',
        default=DEFAULT_CONFIG['config'],
        help='Main configuration file (default: {})'.format(DEFAULT_CONFIG['config']),
    )
    parser.add_argument(
        '--encoders',
        default=DEFAULT_CONFIG['encoders'],
        help='Directory with encoder profiles (default: {})'.format(DEFAULT_CONFIG['encoders']),
    )
    parser.add_argument(
        '--log-file',
        default=DEFAULT_CONFIG['log_file'],
        help='Write log to this file (default: {})'.format(DEFAULT_CONFIG['log_file']),
    )
    parser.add_argument(
        '--jobs',
        type=int,
        default=None,
        help='Number of files to process simultaneously (default: number of CPUs)',
    )
    parser.add_argument(
        '--timeout',
        type=float,
        default=None,
        help='Abort encoder if it runs longer than this many seconds',
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        default=False,
        help='Write debug messages to the log',
    )
    return parser



def parse_args(*a, parser=None, **ka):
    if parser is None:
        parser = make_parser()
    args = parser.parse_args(*a, **ka)
    if args.jobs is not None and args.jobs < 1:
        parser.error('--jobs must be a positive number')
    if args.timeout is not None and args.timeout <= 0:
        parser.error('--timeout must be a positive number')
    if not os.path.isdir(args.directory):
        parser.error('Not a directory: {}'.format(args.directory))
    return args



class SyncJob:
    '''Store essential parameters of the synchronization job'''


    def __init__(self, config_file, encoders_dir, jobs=None, timeout=None, logger=None):
        self.log = logger or log
        self.config = load_config(config_file)
        self.profile = load_encoder_profile(encoders_dir, self.config.conversion_format)
        self.runner = BatchRunner(
            self.config.convert,
            self.profile,
            num_threads=jobs,
            timeout=timeout,
            logger=self.log,
        )
        self.log.debug('Initialized {}'.format(self))


    def __repr__(self):
        return '{cls}({storage!r}, {policy}, {profile!r})'.format(
            cls = self.__class__.__name__,
            storage = self.config.storage_path,
            policy = self.config.convert.name,
            profile = self.profile.name,
        )


    def scan(self, directory):
        return Library(directory, self.config).scan()


    def preview(self, directory, stream=None):
        '''Show planned destinations without touching the library'''
        library = self.scan(directory)
        return preview(library, self.config.convert, self.profile, stream=stream)


    def sync(self, directory, stream=None):
        '''Copy or transcode all music files into the library'''
        library = self.scan(directory)
        try:
            os.makedirs(self.config.storage_path, exist_ok=True)
        except OSError as e:
            raise ConfigError('Cannot create storage directory {}: {}'.format(
                self.config.storage_path,
                e,
            )) from e
        report = self.runner.run(library, skipped=len(library.skipped))
        print(report.show(), file=stream or sys.stdout)
        return report



if __name__ == '__main__':
    run()
