# theremin/store/document.py
import json
from typing import Sequence, Tuple

from theremin.config import AXES, AxisConfig, Config
from theremin.errors import InvalidValue, MalformedDocument, MissingField

WAVE_KEY = "waveShape"
# 舊版檔案用的 key（原本的範例檔就是這個名字）
LEGACY_WAVE_KEYS: Sequence[str] = ("waveShape", "VWWWaveTypeSawtooth")

NUMBER_FIELDS = ("fmin", "fmax", "sensitivity")


def _wave_entry(axis: str, obj: dict, wave_key: str) -> Tuple[str, object]:
    for key in (wave_key, *LEGACY_WAVE_KEYS):
        if key in obj:
            return key, obj[key]
    raise MissingField(wave_key, axis=axis)


def _rename_wave_field(e: InvalidValue, key: str) -> InvalidValue:
    # model 的欄位叫 wave_shape，對外回報檔案裡的 key 名稱
    if e.field != "wave_shape":
        return e
    return InvalidValue(e.axis, key, e.reason, e.value)


def _axis_from_obj(axis: str, obj, wave_key: str) -> AxisConfig:
    if not isinstance(obj, dict):
        raise InvalidValue(axis, None, "expected an object", obj)
    for name in NUMBER_FIELDS + ("effect",):
        if name not in obj:
            raise MissingField(name, axis=axis)
    key, wave = _wave_entry(axis, obj, wave_key)
    ax = AxisConfig(
        fmin=obj["fmin"],
        fmax=obj["fmax"],
        sensitivity=obj["sensitivity"],
        effect=obj["effect"],
        wave_shape=wave,
    )
    try:
        ax.validate(axis)
    except InvalidValue as e:
        raise _rename_wave_field(e, key) from None
    return ax


def check_config(cfg: Config, wave_key: str = WAVE_KEY) -> None:
    """寫檔前的驗證；錯誤欄位名稱跟寫出去的 key 一致。"""
    try:
        cfg.validate()
    except InvalidValue as e:
        raise _rename_wave_field(e, wave_key) from None


def parse_document(data: bytes, wave_key: str = WAVE_KEY) -> Config:
    """bytes -> 驗證過的 Config；任何不合法都丟 LoadError 子類，不做部分接受。"""
    try:
        obj = json.loads(data.decode("utf-8"))
    except UnicodeDecodeError as e:
        raise MalformedDocument(f"not UTF-8 ({e.reason})") from e
    except json.JSONDecodeError as e:
        raise MalformedDocument(f"invalid JSON at line {e.lineno} column {e.colno}: {e.msg}") from e
    except (ValueError, RecursionError) as e:
        # 超長的整數字面值、巢狀過深的陣列/物件
        raise MalformedDocument(f"unreadable JSON ({type(e).__name__}: {e})") from e
    if not isinstance(obj, dict):
        raise MalformedDocument(f"top level must be an object, not {type(obj).__name__}")

    if "type" not in obj:
        raise MissingField("type")
    for axis in AXES:
        if axis not in obj:
            raise MissingField(axis)

    cfg = Config(
        device_type=obj["type"],
        axes={axis: _axis_from_obj(axis, obj[axis], wave_key) for axis in AXES},
    )
    cfg.validate()
    return cfg


def config_to_obj(cfg: Config, wave_key: str = WAVE_KEY) -> dict:
    out = {"type": cfg.device_type}
    for axis in AXES:
        ax = cfg.axes[axis]
        out[axis] = {
            "fmin": ax.fmin,
            "fmax": ax.fmax,
            "sensitivity": ax.sensitivity,
            "effect": ax.effect,
            wave_key: ax.wave_shape,
        }
    return out


def dump_document(cfg: Config, wave_key: str = WAVE_KEY) -> bytes:
    """Config -> 標準格式的 JSON bytes（只有 type/x/y/z，不寫其他 key）。"""
    text = json.dumps(config_to_obj(cfg, wave_key), ensure_ascii=False, indent=2)
    return (text + "\n").encode("utf-8")
