# polygon_lookup.py
# created by:
#   @author: vlv-squid
#   @date: 2025-07-25
#

import json
import logging
import time
from itertools import islice

from feature_indexer import index_collection
from pip_resolver import contains_point
from rtree_index import RtreeIndex
from strtree_index import STRtreeIndex

logger = logging.getLogger(__name__)

INDEX_BACKENDS = {
    "rtree": RtreeIndex,
    "strtree": STRtreeIndex,
}

BACKEND_ALIASES = {
    "dynamic": "rtree",
    "mutable": "rtree",
    "static": "strtree",
    "immutable": "strtree",
}


def load_geojson(path):
    """读取 GeoJSON 文件"""
    with open(path, encoding="utf-8") as f:
        return json.load(f)


class PolygonLookup:
    """点落在哪个多边形内的查询

    先用外包矩形索引筛选候选多边形，再做精确的点在多边形内判断（考虑内环）。
    MultiPolygon 在加载时展开为多个 Polygon，共享原要素的 properties。
    """

    def __init__(self, collection=None, backend="rtree", node_size=None):
        backend = BACKEND_ALIASES.get(backend, backend)
        if backend not in INDEX_BACKENDS:
            raise ValueError(f"未知的索引类型: {backend}, 可选: "
                             f"{', '.join(sorted(INDEX_BACKENDS))}")
        self.backend = backend
        self.node_size = node_size
        # 提前校验 node_size
        self._new_index()
        # (索引, 多边形列表)，重新加载时整体替换
        self._state = (None, [])

        if collection is not None:
            self.load_feature_collection(collection)

    def __len__(self):
        return len(self._state[1])

    @property
    def spatial_index(self):
        return self._state[0]

    @property
    def polygons(self):
        return self._state[1]

    def _new_index(self):
        return INDEX_BACKENDS[self.backend](self.node_size)

    def load_feature_collection(self, collection):
        """从 GeoJSON FeatureCollection 构建索引，替换之前加载的全部内容"""
        start_time = time.time()

        polygons, boxes = index_collection(collection)
        spatial_index = self._new_index()
        spatial_index.build_index(boxes)
        self._state = (spatial_index, polygons)

        logger.info("多边形加载完成! 多边形: %d, 耗时: %.2fms", len(polygons),
                    (time.time() - start_time) * 1000)

    def _matches(self, x, y):
        spatial_index, polygons = self._state
        if spatial_index is None:
            return

        point = (x, y)
        for poly_id in spatial_index.query_by_point(x, y):
            polygon = polygons[poly_id]
            if contains_point(point, polygon):
                yield polygon

    def search_one(self, x, y):
        """返回第一个包含 (x, y) 的多边形，没有则返回 None"""
        return next(self._matches(x, y), None)

    def search_many(self, x, y, limit):
        """返回包含 (x, y) 的多边形集合，limit 为 -1 时不限数量"""
        matches = self._matches(x, y)
        if limit != -1:
            matches = islice(matches, max(limit, 0))
        return {"type": "FeatureCollection", "features": list(matches)}

    def search(self, x, y, limit=None):
        """查询点 (x, y) 所在的多边形

        limit 为 None 时返回单个要素或 None；传入 limit 时总是返回
        FeatureCollection（可能为空）。
        """
        if limit is None:
            return self.search_one(x, y)
        return self.search_many(x, y, limit)
