from io import StringIO
from typing import List

import pandas as pd

from domain.models import SchoolRecord

EXPORT_COLUMNS = ['id', 'name', 'address', 'city', 'state', 'contact', 'email_id', 'image']


def schools_dataframe(schools: List[SchoolRecord]) -> pd.DataFrame:
    return pd.DataFrame([s.to_dict() for s in schools], columns=EXPORT_COLUMNS)


def export_to_csv(schools: List[SchoolRecord]) -> str:
    """Exports the given records to a CSV string (header only when empty)."""
    csv_buf = StringIO()
    schools_dataframe(schools).to_csv(csv_buf, index=False)
    return csv_buf.getvalue()
