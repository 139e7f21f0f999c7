# index_base.py
# created by:
#   @author: vlv-squid
#   @date: 2025-07-23
#

from abc import ABC, abstractmethod


class SpatialIndex(ABC):
    """外包矩形索引的统一接口

    子类把 BoundingBox 映射到 poly_id，查询时只返回候选 poly_id，
    多边形本身由调用方按 poly_id 在多边形列表中取得。
    """

    default_node_size = None
    min_node_size = 2

    def __init__(self, node_size=None):
        if node_size is None:
            node_size = self.default_node_size
        if node_size < self.min_node_size:
            raise ValueError(
                f"{type(self).__name__}: node_size 不能小于 {self.min_node_size}")
        self.node_size = node_size
        self.entry_count = 0

    @abstractmethod
    def build_index(self, boxes):
        pass

    @abstractmethod
    def query_by_bbox(self, bbox):
        pass

    def query_by_point(self, x, y):
        """以零面积矩形查询包含点 (x, y) 的候选要素"""
        return self.query_by_bbox((x, y, x, y))
