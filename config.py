"""
Centralized configuration for the (a,b)-tree
"""
class Config:
    min_branching = 2 # a, minimum children per non-root node
    max_branching = 4 # b, maximum children per node
    dump_indent = "  "
    leaf_label = "Leaf"
    internal_label = "Internal"
    demo_keys = (10, 20, 5, 6, 12, 30, 7, 17, 3, 25, 22)
    log_level = "WARNING"
    log_format = "%(asctime)s %(levelname)s %(name)s: %(message)s"
