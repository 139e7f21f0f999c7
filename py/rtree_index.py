# rtree_index.py
# created by:
#   @author: vlv-squid
#   @date: 2025-07-23
#

import logging
import time

from rtree import index

from index_base import SpatialIndex

logger = logging.getLogger(__name__)


class RtreeIndex(SpatialIndex):
    """基于 libspatialindex 的可变 R 树索引，可重复 build_index"""

    default_node_size = 9
    min_node_size = 4

    def __init__(self, node_size=None):
        super().__init__(node_size)
        self.rtree_idx = None

    def _new_rtree(self):
        # 仅内存中
        rtree_properties = index.Property()
        rtree_properties.dimension = 2
        rtree_properties.leaf_capacity = self.node_size
        rtree_properties.index_capacity = self.node_size
        # 必须小于节点容量
        rtree_properties.near_minimum_overlap_factor = min(
            rtree_properties.near_minimum_overlap_factor, self.node_size - 1)
        return index.Index(properties=rtree_properties)

    def build_index(self, boxes):
        """构建或重建 R 树索引，旧内容全部丢弃"""
        start_time = time.time()

        rtree_idx = self._new_rtree()
        for box in boxes:
            rtree_idx.insert(box.poly_id, box.bounds)

        self.rtree_idx = rtree_idx
        self.entry_count = len(boxes)

        logger.info("R树索引构建完成! 条目: %d, 耗时: %.2fms", self.entry_count,
                    (time.time() - start_time) * 1000)
        return self

    def query_by_bbox(self, bbox):
        """基于 BBox 查询候选 poly_id"""
        if self.rtree_idx is None:
            raise RuntimeError("R树索引未构建，请先调用 build_index()")

        candidate_ids = list(self.rtree_idx.intersection(bbox))
        logger.debug("R树候选要素: %d", len(candidate_ids))
        return candidate_ids
