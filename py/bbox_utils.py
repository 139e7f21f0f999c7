# bbox_utils.py
# created by:
#   @author: vlv-squid
#   @date: 2025-07-25
#

from numbers import Real
from typing import NamedTuple, Optional

from lookup_errors import InvalidGeometryError


class BoundingBox(NamedTuple):
    min_x: float
    min_y: float
    max_x: float
    max_y: float
    poly_id: Optional[int] = None

    @property
    def bounds(self):
        return (self.min_x, self.min_y, self.max_x, self.max_y)


def _is_number(value):
    return isinstance(value, Real) and not isinstance(value, bool)


def coords_of(position):
    if not isinstance(position, (list, tuple)) or len(position) < 2:
        return None
    x, y = position[0], position[1]
    if not (_is_number(x) and _is_number(y)):
        return None
    return x, y


def get_bounding_box(ring, poly_id=None):
    """计算坐标环的外包矩形

    以第一个坐标初始化，再逐点取最小/最大值。环为空、不是坐标序列
    或首点坐标无效时抛出 InvalidGeometryError；后续无效坐标点直接跳过。
    """
    first = None
    if isinstance(ring, (list, tuple)) and ring:
        first = coords_of(ring[0])
    if first is None:
        raise InvalidGeometryError(
            "get_bounding_box: ring must contain at least one valid point")

    min_x, min_y = first
    max_x, max_y = first
    for position in ring[1:]:
        coords = coords_of(position)
        if coords is None:
            continue
        x, y = coords
        if x < min_x:
            min_x = x
        elif x > max_x:
            max_x = x
        if y < min_y:
            min_y = y
        elif y > max_y:
            max_y = y

    return BoundingBox(min_x, min_y, max_x, max_y, poly_id)
