"""paycycle.schedule: JCT payment schedule generation, review and commit."""

# types first: paycycle.infra imports them while this package initializes
from paycycle.schedule.types import ApplicationRecord as ApplicationRecord
from paycycle.schedule.types import ApplicationStatus as ApplicationStatus
from paycycle.schedule.types import PaymentCycle as PaymentCycle
from paycycle.schedule.types import ProjectRef as ProjectRef
from paycycle.schedule.types import Reminder as Reminder
from paycycle.schedule.types import ReminderRule as ReminderRule
from paycycle.schedule.types import ScheduleConfig as ScheduleConfig
from paycycle.schedule.generator import CycleDates as CycleDates
from paycycle.schedule.generator import cycle_dates as cycle_dates
from paycycle.schedule.generator import generate_schedule as generate_schedule
from paycycle.schedule.reminders import add_reminder_rule as add_reminder_rule
from paycycle.schedule.reminders import remove_reminder_rule as remove_reminder_rule
from paycycle.schedule.reminders import reminder_send_date as reminder_send_date
from paycycle.schedule.reminders import upcoming_reminders as upcoming_reminders
from paycycle.schedule.review import check_cycle_ordering as check_cycle_ordering
from paycycle.schedule.review import override_cycle_date as override_cycle_date
from paycycle.schedule.review import validate_schedule as validate_schedule
from paycycle.schedule.parser import merge_extracted_terms as merge_extracted_terms
from paycycle.schedule.parser import parse_schedule_config as parse_schedule_config
from paycycle.schedule.setup import default_first_due_date as default_first_due_date
from paycycle.schedule.setup import initial_config as initial_config
from paycycle.schedule.commit import commit_schedule as commit_schedule
