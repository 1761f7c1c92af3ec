from .table_id import resolve_table_id

__all__ = ["resolve_table_id"]
