# visualization.py
# created by:
#   @author: vlv-squid
#   @date: 2025-07-23
#

import logging
import os

import matplotlib.pyplot as plt

logger = logging.getLogger(__name__)


def _ring_xy(ring):
    xs = [position[0] for position in ring]
    ys = [position[1] for position in ring]
    return xs, ys


class Visualizer:

    @staticmethod
    def visualize_results(polygons, matches, point, query_name, out_dir="./png"):
        """可视化查询结果，返回图片路径"""

        fig, ax = plt.subplots(figsize=(12, 8))

        for polygon in polygons:
            rings = polygon["geometry"]["coordinates"]
            xs, ys = _ring_xy(rings[0])
            ax.fill(xs, ys, color='lightgray', alpha=0.3)
            for hole in rings[1:]:
                xs, ys = _ring_xy(hole)
                ax.plot(xs, ys, color='gray', linewidth=0.5)

        # 高亮显示命中的多边形
        for polygon in matches:
            rings = polygon["geometry"]["coordinates"]
            xs, ys = _ring_xy(rings[0])
            ax.fill(xs, ys, color='red', alpha=0.4)
            for hole in rings[1:]:
                xs, ys = _ring_xy(hole)
                ax.fill(xs, ys, color='white')

        ax.plot(point[0], point[1], 'k*', markersize=10)

        ax.set_title(f"Polygon Lookup Results ({len(matches)} features)")
        ax.set_xlabel('Longitude')
        ax.set_ylabel('Latitude')
        ax.grid(True)
        plt.tight_layout()
        os.makedirs(out_dir, exist_ok=True)
        outpath = os.path.join(out_dir, query_name + ".png")
        plt.savefig(outpath)
        plt.close(fig)
        logger.info("可视化结果已保存为 %s", outpath)
        return outpath
