from docwrap.ingest.tree_ingest import (
    CommentFileUnit,
    ParseFailureWitness,
    TreeIngestBundle,
    ingest_paths,
    ingest_tree_file,
    iter_tree_paths,
    load_tree_payload,
)

__all__ = [
    "CommentFileUnit",
    "ParseFailureWitness",
    "TreeIngestBundle",
    "ingest_paths",
    "ingest_tree_file",
    "iter_tree_paths",
    "load_tree_payload",
]
