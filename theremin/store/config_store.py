# theremin/store/config_store.py
import logging
from typing import Optional

from theremin.config import Config, default_config
from theremin.errors import NotFound, ReadFailure, LoadError, WriteFailure
from theremin.store.blob import FileBlobStore
from theremin.store.document import WAVE_KEY, check_config, dump_document, parse_document
from theremin.utils.path import default_config_path

log = logging.getLogger(__name__)


class ConfigStore:
    """
    固定位置上的設定檔 <-> 驗證過的 Config。

    每個操作都是對 blob store 的獨立交易，不快取內容：save 之後馬上 load
    一定讀到剛寫的資料。沒有內建鎖，多個寫入者要由呼叫端自行排隊。
    """
    def __init__(self, path: Optional[str] = None, blobs=None, wave_key: str = WAVE_KEY):
        self.path = path or default_config_path()
        self.blobs = blobs if blobs is not None else FileBlobStore()
        self.wave_key = wave_key

    def exists(self) -> bool:
        try:
            found = bool(self.blobs.blob_exists(self.path))
        except OSError as e:
            log.warning("Config existence check failed for %s: %s", self.path, e)
            return False
        log.debug("Config at %s exists=%s", self.path, found)
        return found

    def load(self) -> Config:
        try:
            data = self.blobs.read_blob(self.path)
        except FileNotFoundError:
            log.debug("No config at %s", self.path)
            raise NotFound(self.path) from None
        except OSError as e:
            log.warning("Reading config %s failed: %s", self.path, e)
            raise ReadFailure(self.path, str(e)) from e

        try:
            cfg = parse_document(data, wave_key=self.wave_key)
        except LoadError as e:
            log.warning("Rejected config %s: %s", self.path, e)
            raise
        log.debug("Loaded config %s (type=%s)", self.path, cfg.device_type)
        return cfg

    def save(self, config: Config) -> None:
        # 寫入前再驗證一次，壞掉的設定不落地
        check_config(config, self.wave_key)
        data = dump_document(config, wave_key=self.wave_key)
        try:
            self.blobs.write_blob(self.path, data)
        except OSError as e:
            log.warning("Writing config %s failed: %s", self.path, e)
            raise WriteFailure(self.path, str(e)) from e
        log.info("Saved config to %s (%d bytes)", self.path, len(data))

    def load_or_create(self, default: Optional[Config] = None) -> Config:
        """首次執行：把 default（或內建預設值）寫入後回傳。

        只處理「檔案不存在」；壞掉或不合法的檔案照樣丟例外，不自動修復。
        """
        try:
            return self.load()
        except NotFound:
            cfg = default if default is not None else default_config()
            log.info("No config yet, writing defaults to %s", self.path)
            self.save(cfg)
            return cfg
