import errno
import io
import os.path


class MasterNotFound(LookupError):
    pass


class Source(object):

    def __init__(self, name, content, file_path):
        self.name = name
        self.content = content
        self.file_path = file_path


class FileSystemLoader(object):
    _encoding = 'utf-8'

    def __init__(self, path):
        self._path = path

    @classmethod
    def for_file(cls, file_path):
        """Returns loader and document name for a single file path"""
        path, name = os.path.split(file_path)
        return cls(path or os.curdir), name

    def load(self, name):
        file_path = os.path.join(self._path, name)
        try:
            # newline='' keeps line endings, the script region is copied
            # byte for byte
            with io.open(file_path, encoding=self._encoding,
                         newline='') as f:
                content = f.read()
        except IOError as e:
            if e.errno not in (errno.ENOENT, errno.EISDIR, errno.EINVAL,
                               errno.EACCES):
                raise
            raise MasterNotFound(file_path)
        except UnicodeDecodeError:
            raise MasterNotFound(file_path)
        return Source(name, content, file_path)
