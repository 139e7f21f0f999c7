# index_tester.py
# created by:
#   @author: vlv-squid
#   @date: 2025-07-23
#

import logging
import time

from visualization import Visualizer

logger = logging.getLogger(__name__)


class IndexTester:

    def __init__(self, points):
        self.points = points

    def run_performance_test(self, lookups, visualize=False, out_dir="./png"):
        """对每个查询对象逐点查询，返回 {名称: [每个点的匹配数]}"""
        logger.info("===== 性能测试开始 =====")

        match_counts = {}
        for name, lookup in lookups.items():
            counts = []
            start_time = time.time()
            for x, y in self.points:
                result = lookup.search(x, y, -1)
                counts.append(len(result["features"]))
                if visualize:
                    Visualizer.visualize_results(lookup.polygons,
                                                 result["features"], (x, y),
                                                 f"{name}_{x}_{y}", out_dir)
            duration = (time.time() - start_time) * 1000
            logger.info("[测试] %s: 总耗时: %.2fms, 查询点: %d, 结果数: %d", name,
                        duration, len(self.points), sum(counts))
            match_counts[name] = counts

        logger.info("===== 性能测试结束 =====")
        return match_counts
