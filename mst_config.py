"""
Configuration constants for the MST toolkit
Thresholds, strategy defaults and logging setup live here
"""

import logging
import os

# Graph classification: density < SPARSE is sparse, density > DENSE is dense
SPARSE_DENSITY_THRESHOLD = 0.3
DENSE_DENSITY_THRESHOLD = 0.7

# Two costs closer than this are considered equal
COST_TOLERANCE = 1e-10

# Arity used by the d-ary heap queue strategy
DEFAULT_HEAP_ARITY = 4

# Upper bound on the number of buckets used by bucket sort
MAX_SORT_BUCKETS = 100

# Prim suitability and queue recommendation thresholds
PRIM_SMALL_GRAPH_VERTICES = 1000
PRIM_ARRAY_QUEUE_VERTICES = 500
PRIM_BINARY_HEAP_VERTICES = 5000

# Kruskal suitability and sort recommendation thresholds
KRUSKAL_MAX_DENSITY = 0.5
KRUSKAL_QUICKSORT_EDGES = 1000
KRUSKAL_MERGESORT_EDGES = 10000
KRUSKAL_ARRAY_UNION_FIND_VERTICES = 1000

# Random graph generation
DEFAULT_NUM_NODES = 6
DEFAULT_EDGE_PROBABILITY = 0.5
DEFAULT_SEED = 42
MIN_EDGE_WEIGHT = 1
MAX_EDGE_WEIGHT = 10
MAX_CONNECT_ATTEMPTS = 100

# Output locations for the command line tools
GRAPH_DATA_DIR = "graph_data"
GRAPH_METADATA_FILE = "graph_metadata.json"
VISUALIZATION_DIR = "mst_visualizations"
EXPERIMENTS_FILE = "mst_experiments.json"

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level=None):
    """Configure root logging for the command line tools"""
    level = (level or LOG_LEVEL).upper()
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)
