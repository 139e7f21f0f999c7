# lookup_errors.py
# created by:
#   @author: vlv-squid
#   @date: 2025-07-25
#


class PolygonLookupError(ValueError):
    """多边形查询相关错误的基类"""


class MissingCollectionError(PolygonLookupError):
    """加载时未传入要素集合"""


class MalformedCollectionError(PolygonLookupError):
    """要素集合缺少 features 列表或格式不正确"""


class InvalidGeometryError(PolygonLookupError):
    """坐标环为空或首个坐标无效"""
