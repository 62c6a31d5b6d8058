"""
Listing compatibility engine.

Scores how well a listing (job, rental, service, marketplace item, favor,
holiday, art, giveaway, course or community activity) matches a user's
preferences, as a 0-100 score broken down into weighted dimensions.
"""

from compat_engine.utils.constants import APP_NAME, VERSION

__version__ = VERSION
__app_name__ = APP_NAME
