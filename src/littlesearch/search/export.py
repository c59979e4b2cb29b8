from pathlib import Path

from littlesearch.index.engine import SearchEngine


def export_index(engine: SearchEngine, output: Path) -> int:
    """Write the index as a (form, rank, doc_id, frequency) parquet table."""
    df = engine.to_polars()
    output.parent.mkdir(parents=True, exist_ok=True)
    df.write_parquet(output)
    return len(df)
