"""CRUD operations for free-trial usage logs."""

from sqlalchemy.ext.asyncio import AsyncSession

from models.free_trial_logs import FreeTrialLog


async def create_free_trial_log(
    db: AsyncSession,
    ip_address: str,
    document_name: str,
    document_size: int,
    document_type: str,
) -> FreeTrialLog:
    log = FreeTrialLog(
        ip_address=ip_address,
        document_name=document_name,
        document_size=document_size,
        document_type=document_type,
    )

    db.add(log)
    await db.commit()
    await db.refresh(log)

    return log
