# theremin/errors.py
from typing import Any, Optional

_UNSET = object()


def _show(value) -> str:
    try:
        return repr(value)
    except ValueError:
        # int 超過 str 轉換的位數上限
        return f"<int of {value.bit_length()} bits>"


class ConfigError(Exception):
    """所有設定檔錯誤的基底。"""


class LoadError(ConfigError):
    pass


class SaveError(ConfigError):
    pass


class NotFound(LoadError):
    """固定位置沒有設定檔（首次執行的正常狀況）。"""
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"No config at {path}")


class ReadFailure(LoadError):
    def __init__(self, path: str, reason: str):
        self.path, self.reason = path, reason
        super().__init__(f"Cannot read config at {path}: {reason}")


class MalformedDocument(LoadError):
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Malformed config document: {reason}")


class MissingField(LoadError):
    """缺少必要欄位；頂層欄位的 axis 為 None。"""
    def __init__(self, name: str, axis: Optional[str] = None):
        self.name, self.axis = name, axis
        where = f"{axis}.{name}" if axis else name
        super().__init__(f"Missing field: {where}")


class InvalidValue(LoadError):
    """欄位存在但違反不變條件。

    頂層欄位（`type`）的 axis 為 None；整個軸項目錯誤時 field 為 None。
    """
    def __init__(self, axis: Optional[str], field: Optional[str], reason: str, value: Any = _UNSET):
        self.axis, self.field, self.reason = axis, field, reason
        self.value = None if value is _UNSET else value
        where = ".".join(p for p in (axis, field) if p) or "<config>"
        msg = f"{where}: {reason}"
        if value is not _UNSET:
            msg += f" (got {_show(value)})"
        super().__init__(msg)


class WriteFailure(SaveError):
    def __init__(self, path: str, reason: str):
        self.path, self.reason = path, reason
        super().__init__(f"Cannot write config to {path}: {reason}")
