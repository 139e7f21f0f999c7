# pip_resolver.py
# created by:
#   @author: vlv-squid
#   @date: 2025-07-25
#

from shapely.geometry import Point, Polygon

from bbox_utils import coords_of


def point_in_ring(point, ring):
    """判断点是否落在坐标环内（含边界）"""
    if not isinstance(ring, (list, tuple)):
        return False
    # 与外包矩形计算一致，跳过无效坐标点
    coords = [c for c in map(coords_of, ring) if c is not None]
    if coords and coords[0] != coords[-1]:
        coords.append(coords[0])
    # 闭合后少于 4 个坐标的退化环不包含任何点
    if len(coords) < 4:
        return False
    return Polygon(coords).intersects(Point(point[0], point[1]))


def contains_point(point, polygon):
    """点在外环内且不在任何内环（洞）内时返回 True"""
    rings = polygon["geometry"]["coordinates"]
    if not rings or not rings[0]:
        return False

    if not point_in_ring(point, rings[0]):
        return False

    for hole in rings[1:]:
        if hole and point_in_ring(point, hole):
            return False
    return True
