'''
Outcome of the synchronization job
'''


from collections import OrderedDict
from threading import Lock



class ThreadSafeCounter:
    '''
    A counter that can be safely incremented by multiple threads
    '''

    def __init__(self, initial=0):
        self.value = initial
        self.lock = Lock()


    def increment(self, number=1):
        with self.lock:
            self.value += number
            return self.value



class SyncReport:
    '''
    Per-file outcomes of a sync run.

    Every processed file is recorded exactly once, either as a success or
    together with the exception that made it fail.
    '''

    def __init__(self, skipped=0):
        self._converted = ThreadSafeCounter()
        self._copied = ThreadSafeCounter()
        self._lock = Lock()
        self.outcomes = OrderedDict()  # source path -> None or exception
        self.skipped = skipped


    def __repr__(self):
        return '<{cls}(succeeded={ok}, failed={failed}, skipped={skip})>'.format(
            cls = self.__class__.__name__,
            ok = self.succeeded,
            failed = self.failed,
            skip = self.skipped,
        )


    def record_done(self, audio_file):
        '''Record a file that was copied or transcoded'''
        if audio_file.converted:
            self._converted.increment()
        else:
            self._copied.increment()
        self._record(audio_file.source_path, None)


    def record_failure(self, audio_file, error):
        '''Record a file that could not be processed'''
        self._record(audio_file.source_path, error)


    def _record(self, path, outcome):
        with self._lock:
            if path in self.outcomes:
                raise ValueError('Outcome for {} was already recorded'.format(path))
            self.outcomes[path] = outcome


    @property
    def total(self):
        return len(self.outcomes)


    @property
    def failures(self):
        '''Mapping of source paths to exceptions that made them fail'''
        with self._lock:
            return OrderedDict(
                (path, error)
                for path, error in self.outcomes.items()
                if error is not None
            )


    @property
    def failed(self):
        return len(self.failures)


    @property
    def succeeded(self):
        return self.total - self.failed


    @property
    def converted(self):
        return self._converted.value


    @property
    def copied(self):
        return self._copied.value


    def show(self):
        lines = ['{ok} of {total} files converted and saved successfully '
                 '({converted} transcoded, {copied} copied, {skip} skipped)'.format(
            ok = self.succeeded,
            total = self.total,
            converted = self.converted,
            copied = self.copied,
            skip = self.skipped,
        )]
        for path, error in self.failures.items():
            lines.append('  FAILED {}: {}'.format(path, error))
        return '\n'.join(lines)
