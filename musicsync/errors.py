'''
Exceptions raised by musicsync
'''


class SyncError(RuntimeError):
    '''Base error type'''



class ConfigError(SyncError):
    '''Main config or encoder profile is missing or invalid'''



class UsageError(SyncError):
    '''Invalid command line invocation'''



class MetadataError(SyncError):
    '''Music file can not be placed into the library'''



class NoMetadata(MetadataError):
    '''File exposes no metadata fields at all'''



class UnknownExtension(MetadataError):
    '''File name has no extension to classify'''



class FileOperationError(SyncError):
    '''Copying or transcoding of a single file has failed'''



class CopyError(FileOperationError):
    '''Source file could not be copied into the library'''



class EncodeError(FileOperationError):
    '''External encoder could not be started or reported a failure'''

    def __init__(self, message, returncode=None, stderr=''):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr
