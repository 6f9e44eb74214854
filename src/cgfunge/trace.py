# Tabular view of a traced run, one row per executed step.
import pyarrow as pa
import pyarrow.csv as pacsv

# Stack tops are stored as decimal text: stack values are unbounded and
# do not fit a fixed-width integer column.
TRACE_SCHEMA = pa.schema([
    ('step', pa.int64()),
    ('row', pa.int64()),
    ('col', pa.int64()),
    ('char', pa.string()),
    ('direction', pa.string()),
    ('skipped', pa.bool_()),
    ('stack_depth', pa.int64()),
    ('top', pa.string()),
])


def build_trace_table(records):
    """Builds a pyarrow Table from the step records collected by the interpreter.

    Args:
        records (list): dicts with the keys of TRACE_SCHEMA

    Returns:
        pyarrow.Table: One row per step; empty (but typed) for no records
    """
    columns = {name: [] for name in TRACE_SCHEMA.names}
    for record in records:
        for name in TRACE_SCHEMA.names:
            value = record.get(name)
            if name == 'top' and value is not None:
                value = str(value)
            columns[name].append(value)
    arrays = [pa.array(columns[f.name], type=f.type) for f in TRACE_SCHEMA]
    return pa.Table.from_arrays(arrays, schema=TRACE_SCHEMA)


def trace_to_csv(table):
    """Returns the trace table in CSV format (with a header row)."""
    sink = pa.BufferOutputStream()
    pacsv.write_csv(table, sink)
    return sink.getvalue().to_pybytes().decode('utf-8')


def write_trace_csv(table, filename):
    pacsv.write_csv(table, filename)
