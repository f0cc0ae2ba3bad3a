from tomorrow_agents.models.memory_record import MemoryRecord, WorkingMemoryRecord

__all__ = ["MemoryRecord", "WorkingMemoryRecord"]
