# ========================= config.py =========================
import math
from dataclasses import dataclass, field
from typing import Dict, Optional

from theremin.errors import InvalidValue, MissingField

AXES = ("x", "y", "z")
EFFECTS = ("none", "autotune", "harmony")
# 反應曲線（raw -> frequency），不是振盪器波形
WAVE_SHAPES = ("sin", "linear", "square", "triangle", "sawtooth")


def _check_number(axis: Optional[str], name: str, value) -> float:
    # bool 是 int 的子類，JSON 的 true/false 不算數字
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidValue(axis, name, "expected a number", value)
    try:
        finite = math.isfinite(value)
    except OverflowError:
        # 超過 float 範圍的 JSON 整數
        finite = False
    if not finite:
        raise InvalidValue(axis, name, "must be finite", value)
    return value


def _check_choice(axis: str, name: str, value, choices) -> str:
    if not isinstance(value, str):
        raise InvalidValue(axis, name, "expected a string", value)
    if value not in choices:
        raise InvalidValue(axis, name, f"must be one of {', '.join(choices)}", value)
    return value


@dataclass
class AxisConfig:
    fmin: float = 20.0         # Hz
    fmax: float = 300.0        # Hz
    sensitivity: float = 1.0   # raw magnitude scale
    effect: str = "none"
    wave_shape: str = "sin"

    def validate(self, axis: str) -> None:
        fmin = _check_number(axis, "fmin", self.fmin)
        if fmin < 0:
            raise InvalidValue(axis, "fmin", "must be >= 0", fmin)
        fmax = _check_number(axis, "fmax", self.fmax)
        if fmin > fmax:
            raise InvalidValue(axis, "fmin", f"must not exceed fmax {fmax}", fmin)
        sens = _check_number(axis, "sensitivity", self.sensitivity)
        if sens <= 0:
            raise InvalidValue(axis, "sensitivity", "must be > 0", sens)
        _check_choice(axis, "effect", self.effect, EFFECTS)
        _check_choice(axis, "wave_shape", self.wave_shape, WAVE_SHAPES)

    @property
    def span(self) -> float:
        return self.fmax - self.fmin


@dataclass
class Config:
    device_type: str = "touchscreen"
    axes: Dict[str, AxisConfig] = field(default_factory=dict)

    def axis(self, name: str) -> AxisConfig:
        return self.axes[name]

    def validate(self) -> None:
        """遇到第一個不合法的欄位就丟例外；全部合法時回傳 None。"""
        if not isinstance(self.device_type, str) or not self.device_type:
            raise InvalidValue(None, "type", "expected a non-empty string", self.device_type)
        for name in AXES:
            if name not in self.axes:
                raise MissingField(name)
        for name in self.axes:
            if name not in AXES:
                raise InvalidValue(name, None, "unknown axis")
        for name in AXES:
            ax = self.axes[name]
            if not isinstance(ax, AxisConfig):
                raise InvalidValue(name, None, "expected an AxisConfig", ax)
            ax.validate(name)


def default_config(device_type: str = "touchscreen") -> Config:
    """首次執行用的預設值：三軸 20–300 Hz、sensitivity 1、無效果、sin 曲線。"""
    return Config(device_type=device_type, axes={name: AxisConfig() for name in AXES})
