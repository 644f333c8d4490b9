# reliefhub/services/campaigns.py
import logging
import math

from bson import ObjectId

from reliefhub.db import CAMPAIGNS
from reliefhub.errors import ApiError, not_found
from reliefhub.services.amounts import as_amount

logger = logging.getLogger(__name__)


async def contribute(store, campaign_id: ObjectId, amount: float, retries: int = 5) -> float:
    """
    Add ``amount`` to a campaign's collectedAmount and return the new total.

    The write only lands if collectedAmount still holds the value that was
    read; otherwise the campaign is re-read and the sum recomputed.
    """
    for attempt in range(1, retries + 1):
        campaign = await store.find_one(CAMPAIGNS, {"_id": campaign_id})
        if not campaign:
            raise not_found("Campaign")

        current = campaign.get("collectedAmount")
        total = as_amount(current) + amount
        if not math.isfinite(total):
            raise ApiError(400, {"error": "Invalid amount"})
        matched = await store.update_one(
            CAMPAIGNS,
            {"_id": campaign_id, "collectedAmount": current},
            {"collectedAmount": total},
        )
        if matched:
            return total
        logger.info("collectedAmount of %s changed concurrently (attempt %d)", campaign_id, attempt)

    raise ApiError(409, {"error": "Campaign was updated concurrently, retry"})
