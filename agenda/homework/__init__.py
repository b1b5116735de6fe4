"""Homework record engine: models, priority classification and storage."""
from .models import HomeworkRecord, Priority, parse_record, record_key
from .priority import classify
from .service import RecordStore, get_record_store
from .router import router as homework_router

__all__ = [
    'HomeworkRecord',
    'Priority',
    'parse_record',
    'record_key',
    'classify',
    'RecordStore',
    'get_record_store',
    'homework_router'
]
