# runner.py
# created by:
#   @author: vlv-squid
#   @date: 2025-07-23
#

import argparse
import json
import logging
from typing import Dict

from index_tester import IndexTester
from polygon_lookup import INDEX_BACKENDS, PolygonLookup, load_geojson
from visualization import Visualizer


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="查询点 (x, y) 落在 GeoJSON 中的哪个多边形内")
    parser.add_argument("data", help="GeoJSON FeatureCollection 文件")
    parser.add_argument("x", type=float)
    parser.add_argument("y", type=float)
    parser.add_argument("--limit", type=int, default=None,
                        help="返回结果数上限，-1 表示全部")
    parser.add_argument("--backend", default="rtree",
                        help="索引类型: rtree 或 strtree")
    parser.add_argument("--node-size", type=int, default=None)
    parser.add_argument("--benchmark", action="store_true",
                        help="对所有索引类型做性能对比")
    parser.add_argument("--visualize", action="store_true")
    parser.add_argument("--out-dir", default="./png")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s")

    collection = load_geojson(args.data)

    if args.benchmark:
        lookups: Dict[str, PolygonLookup] = {
            name: PolygonLookup(collection, backend=name)
            for name in INDEX_BACKENDS
        }
        tester = IndexTester([(args.x, args.y)])
        counts = tester.run_performance_test(lookups,
                                             visualize=args.visualize,
                                             out_dir=args.out_dir)
        print(json.dumps(counts, ensure_ascii=False))
        return 0

    lookup = PolygonLookup(collection,
                           backend=args.backend,
                           node_size=args.node_size)
    result = lookup.search(args.x, args.y, args.limit)

    if args.visualize:
        if result is None:
            matches = []
        elif args.limit is None:
            matches = [result]
        else:
            matches = result["features"]
        Visualizer.visualize_results(lookup.polygons, matches,
                                     (args.x, args.y), "lookup", args.out_dir)

    print(json.dumps(result, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
