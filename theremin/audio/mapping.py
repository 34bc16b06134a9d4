# audio/mapping.py
import math
from typing import Dict

from theremin.config import AXES, AxisConfig, Config

def _clamp01(v: float) -> float:
    return max(0.0, min(1.0, float(v)))

def _sawtooth(t: float) -> float:
    # 兩段斜坡；t == 1 時停在頂端而不是掉回 0
    return 1.0 if t >= 1.0 else (2.0 * t) % 1.0

CURVES = {
    "linear":   lambda t: t,
    "sin":      lambda t: math.sin(t * math.pi / 2),
    "square":   lambda t: t * t,
    "triangle": lambda t: 1.0 - abs(2.0 * t - 1.0),
    "sawtooth": _sawtooth,
}

def shape(wave_shape: str, t: float) -> float:
    """t（0..1）在反應曲線上的值；未知的曲線名稱丟 KeyError。"""
    return CURVES[wave_shape](_clamp01(t))

def axis_frequency(axis: AxisConfig, magnitude: float) -> float:
    t = _clamp01(magnitude * axis.sensitivity)
    return axis.fmin + axis.span * shape(axis.wave_shape, t)

def frequencies(cfg: Config, reading) -> Dict[str, float]:
    """AxisReading -> 三軸頻率 {"x": Hz, "y": Hz, "z": Hz}"""
    return {name: axis_frequency(cfg.axes[name], getattr(reading, name)) for name in AXES}
