"""paycycle.core: public API for core value types."""

from paycycle.core.calendar import add_calendar_months as add_calendar_months
from paycycle.core.calendar import add_days as add_days
from paycycle.core.calendar import end_of_month as end_of_month
from paycycle.core.calendar import is_month_end as is_month_end
from paycycle.core.calendar import parse_iso_date as parse_iso_date
from paycycle.core.calendar import period_label as period_label
from paycycle.core.errors import FieldViolation as FieldViolation
from paycycle.core.errors import InvalidConfigurationError as InvalidConfigurationError
from paycycle.core.errors import PaycycleError as PaycycleError
from paycycle.core.errors import PersistenceError as PersistenceError
from paycycle.core.errors import ValidationError as ValidationError
from paycycle.core.result import Err as Err
from paycycle.core.result import Ok as Ok
from paycycle.core.result import Result as Result
from paycycle.core.result import sequence as sequence
from paycycle.core.result import unwrap as unwrap
from paycycle.core.serialization import canonical_bytes as canonical_bytes
from paycycle.core.serialization import content_hash as content_hash
from paycycle.core.types import NonEmptyStr as NonEmptyStr
from paycycle.core.types import Percentage as Percentage
from paycycle.core.types import TriggerField as TriggerField
from paycycle.core.types import UtcDatetime as UtcDatetime
