'''
Concurrent execution of file operations
'''


import os
from queue import Queue
from threading import Thread

from musicsync.encoders import ExternalEncoder, VerbatimFileCopy
from musicsync.errors import FileOperationError
from musicsync.policy import Decision, decide
from musicsync.report import SyncReport


import logging
log = logging.getLogger(__name__)



def execute_in_threadqueue(function, args_seq,
                           num_threads=None, buffer_size=None, break_value=None):
    '''
    Execute a function with each argument from a given sequence.

    Execution in done in a fixed number of threads, args_seq is consumed
    lazily with a bounded lookahead (use buffer_size). break_value is a
    singleton object that can never occur in the args_seq - it is used to
    signal the end of the sequence to each thread.

    Exceptions raised by the function are logged and do not stop the
    remaining tasks.
    '''
    if num_threads is None:
        num_threads = os.cpu_count() or 1
    if num_threads < 1:
        raise ValueError('At least one thread is required, got {}'.format(num_threads))
    if buffer_size is None:
        buffer_size = num_threads * 5

    queue = Queue(maxsize=buffer_size)
    threads = []

    def worker():
        while True:
            task = queue.get()
            if task is break_value:
                queue.task_done()
                break
            try:
                function(task)
            except Exception:
                log.exception('Unhandled error while processing {!r}'.format(task))
            finally:
                queue.task_done()

    for i in range(num_threads):  # create worker threads
        t = Thread(target=worker, daemon=True)
        t.start()
        threads.append(t)

    for task in args_seq:
        if task is break_value:
            raise ValueError('Break value can never occur in the args_seq')
        queue.put(task)

    queue.join()  # block until all tasks are done

    for i in range(num_threads):  # stop workers
        queue.put(break_value)
    for t in threads:
        t.join()



class BatchRunner:
    '''Copy or transcode a batch of AudioFile objects'''


    def __init__(self, policy, profile, num_threads=None, timeout=None, logger=None):
        self.policy = policy
        self.profile = profile
        self.num_threads = num_threads
        self.log = logger or log
        self.workers = {
            Decision.TRANSCODE: ExternalEncoder(profile, timeout=timeout, logger=self.log),
            Decision.COPY: VerbatimFileCopy(logger=self.log),
        }
        self.log.debug('Initialized {}'.format(self))


    def __repr__(self):
        return '{cls}({policy}, {profile!r})'.format(
            cls = self.__class__.__name__,
            policy = self.policy.name,
            profile = self.profile.name,
        )


    def run(self, audio_files, skipped=0):
        '''Process all files and return SyncReport'''
        report = SyncReport(skipped=skipped)
        execute_in_threadqueue(
            lambda audio_file: self.process(audio_file, report),
            audio_files,
            num_threads=self.num_threads,
        )
        self.log.info(repr(report))
        return report


    def process(self, audio_file, report):
        '''Execute a single file operation and record its outcome'''
        self.log.debug('Started {}'.format(audio_file))
        try:
            decision = decide(self.policy, audio_file, self.profile.target_extension)
            self.workers[decision](audio_file)
        except FileOperationError as e:
            self.log.error('Failed {}: {}'.format(audio_file.source_path, e))
            report.record_failure(audio_file, e)
            return
        except Exception as e:
            self.log.exception('Unexpected error while processing {}'.format(audio_file.source_path))
            report.record_failure(audio_file, e)
            return
        report.record_done(audio_file)
        self.log.debug('Finished {}'.format(audio_file))
