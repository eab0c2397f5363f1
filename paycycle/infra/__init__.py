"""paycycle.infra: configuration, storage protocols and adapters."""

from paycycle.infra.config import ScheduleDefaults as ScheduleDefaults
from paycycle.infra.memory_adapter import InMemoryApplicationStore as InMemoryApplicationStore
from paycycle.infra.protocols import ApplicationStore as ApplicationStore
