'''
Unit tests for exception hierarchy
'''


from unittest import TestCase

from musicsync import errors



class Hierarchy(TestCase):
    def test_classes(self):
        dataset = (
            # class, parent
            (errors.ConfigError, errors.SyncError),
            (errors.UsageError, errors.SyncError),
            (errors.NoMetadata, errors.MetadataError),
            (errors.UnknownExtension, errors.MetadataError),
            (errors.CopyError, errors.FileOperationError),
            (errors.EncodeError, errors.FileOperationError),
        )
        for cls, parent in dataset:
            with self.subTest(cls=cls.__name__):
                self.assertTrue(issubclass(cls, parent))
                self.assertTrue(issubclass(cls, errors.SyncError))
                self.assertTrue(cls.__doc__)


    def test_encode_error_details(self):
        error = errors.EncodeError('failed', returncode=1, stderr='oops')
        self.assertEqual(str(error), 'failed')
        self.assertEqual((error.returncode, error.stderr), (1, 'oops'))
