# ========================= input/touch.py =========================
import pygame
from dataclasses import dataclass
from typing import Optional, Tuple

@dataclass(frozen=True)
class AxisReading:
    x: float  # 0 左 .. 1 右
    y: float  # 0 下 .. 1 上
    z: float  # 壓力 / 按住

def _clamp01(v: float) -> float:
    return max(0.0, min(1.0, float(v)))

class TouchReader:
    """
    把 pygame 事件轉成三軸讀值：
    - 手指事件 x/y 已是 0..1，z 取 pressure
    - 滑鼠事件用視窗大小正規化，左鍵按住時 z = 1
    - 放開時 z = 0，位置沿用最後一次
    """
    def __init__(self, surface_size: Tuple[int, int]):
        self.w, self.h = surface_size
        self.last = AxisReading(0.0, 0.0, 0.0)

    def _from_pos(self, pos, z: float) -> AxisReading:
        mx, my = pos
        x = mx / max(1, self.w - 1)
        y = 1.0 - my / max(1, self.h - 1)
        return AxisReading(_clamp01(x), _clamp01(y), _clamp01(z))

    def handle_event(self, e) -> Optional[AxisReading]:
        if e.type in (pygame.FINGERDOWN, pygame.FINGERMOTION):
            r = AxisReading(_clamp01(e.x), _clamp01(1.0 - e.y), _clamp01(getattr(e, "pressure", 1.0)))
        elif e.type == pygame.FINGERUP:
            r = AxisReading(self.last.x, self.last.y, 0.0)
        elif e.type == pygame.MOUSEMOTION:
            held = bool(e.buttons[0]) if getattr(e, "buttons", None) else False
            r = self._from_pos(e.pos, 1.0 if held else 0.0)
        elif e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
            r = self._from_pos(e.pos, 1.0)
        elif e.type == pygame.MOUSEBUTTONUP and e.button == 1:
            r = AxisReading(self.last.x, self.last.y, 0.0)
        else:
            return None
        self.last = r
        return r
