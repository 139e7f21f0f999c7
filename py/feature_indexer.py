# feature_indexer.py
# created by:
#   @author: vlv-squid
#   @date: 2025-07-25
#

import logging
from collections.abc import Mapping

from bbox_utils import get_bounding_box
from lookup_errors import (InvalidGeometryError, MalformedCollectionError,
                           MissingCollectionError)

logger = logging.getLogger(__name__)


def _primary_ring(coordinates):
    if not isinstance(coordinates, (list, tuple)) or not coordinates:
        return None
    ring = coordinates[0]
    if not isinstance(ring, (list, tuple)) or not ring:
        return None
    return ring


def _expand_feature(feature):
    """把要素展开为单多边形记录，MultiPolygon 每个子多边形一条记录"""
    if not isinstance(feature, Mapping):
        return
    geometry = feature.get("geometry")
    if not geometry or not isinstance(geometry, Mapping):
        return
    coordinates = geometry.get("coordinates")
    if _primary_ring(coordinates) is None:
        return

    geom_type = geometry.get("type")
    if geom_type == "Polygon":
        yield feature
    elif geom_type == "MultiPolygon":
        properties = feature.get("properties")
        for child_coords in coordinates:
            # 子多边形共享父要素的 properties 对象
            yield {
                "type": "Feature",
                "properties": properties,
                "geometry": {
                    "type": "Polygon",
                    "coordinates": child_coords
                }
            }


def index_collection(collection):
    """遍历要素集合，返回 (多边形列表, 外包矩形列表)

    两个列表按 poly_id 对齐：polygons[box.poly_id] 即该矩形对应的多边形。
    几何缺失或外环为空的要素直接跳过，不抛出错误。
    """
    if collection is None:
        raise MissingCollectionError(
            "index_collection: collection parameter is required")
    if not isinstance(collection, Mapping) or "features" not in collection:
        raise MalformedCollectionError(
            "index_collection: collection must have a 'features' property")
    features = collection["features"]
    if not isinstance(features, (list, tuple)):
        raise MalformedCollectionError(
            "index_collection: collection.features must be a list")

    polygons = []
    boxes = []
    skipped = 0

    for feature in features:
        indexed = False
        for polygon in _expand_feature(feature):
            outer = _primary_ring(polygon["geometry"]["coordinates"])
            if outer is None:
                continue
            try:
                box = get_bounding_box(outer, poly_id=len(polygons))
            except InvalidGeometryError as exc:
                logger.warning("跳过几何无效的要素: %s", exc)
                continue
            boxes.append(box)
            polygons.append(polygon)
            indexed = True
        if not indexed:
            skipped += 1

    logger.debug("要素: %d, 多边形: %d, 跳过: %d", len(features), len(polygons),
                 skipped)
    return polygons, boxes
