# strtree_index.py
# created by:
#   @author: vlv-squid
#   @date: 2025-07-25
#

import logging
import time

import shapely
from shapely import STRtree

from index_base import SpatialIndex

logger = logging.getLogger(__name__)


def _envelope(bounds):
    min_x, min_y, max_x, max_y = bounds
    if min_x == max_x and min_y == max_y:
        return shapely.Point(min_x, min_y)
    if min_x == max_x or min_y == max_y:
        return shapely.LineString([(min_x, min_y), (max_x, max_y)])
    return shapely.box(min_x, min_y, max_x, max_y)


class STRtreeIndex(SpatialIndex):
    """基于 shapely STRtree 的静态打包索引

    条目数在构建时确定，构建后不可修改；要反映多边形集合的变化只能新建实例。
    """

    default_node_size = 16

    def __init__(self, node_size=None):
        super().__init__(node_size)
        self.str_tree = None
        self.poly_ids = []

    def build_index(self, boxes):
        if self.str_tree is not None:
            raise RuntimeError("STRtree索引已构建，不可修改，请新建索引实例")

        start_time = time.time()

        boxes = list(boxes)
        envelopes = [_envelope(box.bounds) for box in boxes]
        self.poly_ids = [box.poly_id for box in boxes]
        self.str_tree = STRtree(envelopes, node_capacity=self.node_size)
        self.entry_count = len(boxes)

        logger.info("STRtree索引构建完成! 条目: %d, 耗时: %.2fms",
                    self.entry_count, (time.time() - start_time) * 1000)
        return self

    def query_by_bbox(self, bbox):
        """基于 BBox 查询候选 poly_id"""
        if self.str_tree is None:
            raise RuntimeError("STRtree索引未构建，请先调用 build_index()")

        positions = self.str_tree.query(_envelope(bbox))
        candidate_ids = [self.poly_ids[pos] for pos in positions.tolist()]
        logger.debug("STRtree候选要素: %d", len(candidate_ids))
        return candidate_ids
