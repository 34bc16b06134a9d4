# theremin/store/blob.py
import os
import stat
import tempfile
from typing import Dict


class FileBlobStore:
    """
    本機檔案系統的 blob 存取：
    - blob_exists(path) -> bool
    - read_blob(path) -> bytes；不存在時丟 FileNotFoundError
    - write_blob(path, data) 先寫同目錄的暫存檔再 os.replace，失敗時舊內容不變；
      覆寫時沿用舊檔的權限，新檔則是 mkstemp 的 0600（只給使用者本人）
    """
    def blob_exists(self, path: str) -> bool:
        return os.path.isfile(path)

    def read_blob(self, path: str) -> bytes:
        with open(path, "rb") as f:
            return f.read()

    def write_blob(self, path: str, data: bytes) -> None:
        d = os.path.dirname(os.path.abspath(path))
        os.makedirs(d, exist_ok=True)
        fd, tmp = tempfile.mkstemp(prefix="." + os.path.basename(path) + ".", suffix=".tmp", dir=d)
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            if os.path.exists(path):
                os.chmod(tmp, stat.S_IMODE(os.stat(path).st_mode))
            os.replace(tmp, path)
        except BaseException:
            try: os.unlink(tmp)
            except OSError: pass
            raise


class MemoryBlobStore:
    """用 dict 存的版本，給沒有檔案系統的宿主和測試用。"""
    def __init__(self):
        self.blobs: Dict[str, bytes] = {}

    def blob_exists(self, path: str) -> bool:
        return path in self.blobs

    def read_blob(self, path: str) -> bytes:
        try:
            return self.blobs[path]
        except KeyError:
            raise FileNotFoundError(path) from None

    def write_blob(self, path: str, data: bytes) -> None:
        self.blobs[path] = bytes(data)
