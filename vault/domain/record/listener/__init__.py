from vault.domain.record.listener.record_event_logger import RecordEventLogger

__all__ = ["RecordEventLogger"]
