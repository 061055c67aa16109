"""Company lookups used to enrich job records."""

import logging

from jobly.database import Store
from jobly.errors import NotFoundError

logger = logging.getLogger(__name__)

COMPANY_COLUMNS = (
    'handle, name, description, '
    'num_employees AS "numEmployees", logo_url AS "logoUrl"'
)


async def get_company(store: Store, handle: str) -> dict:
    """Get a company's descriptive attributes by handle.

    Returns:
        ``{handle, name, description, numEmployees, logoUrl}``

    Raises:
        NotFoundError: If no company has this handle
    """
    rows = await store.execute(
        f"SELECT {COMPANY_COLUMNS} FROM companies WHERE handle = $1",
        [handle],
    )
    if not rows:
        raise NotFoundError(f"No company: {handle}")

    logger.debug(f"Loaded company {handle}")
    return rows[0]
