from models.course import Course, ARRANGED
from models.faculty import Faculty, FacultySchedule, ScheduleConflictError
from models.faculty_directory import FacultyDirectory
from models.sorted_list import SortedList

__all__ = [
    "Course",
    "ARRANGED",
    "Faculty",
    "FacultySchedule",
    "ScheduleConflictError",
    "FacultyDirectory",
    "SortedList",
]
