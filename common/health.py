"""Liveness probe shared by every companion router set."""

import fastapi

router = fastapi.APIRouter(tags=['health'])


@router.api_route('/health', methods=['GET', 'HEAD'])
async def health() -> dict[str, str]:
    """Report that the service is up."""
    return {'status': 'healthy'}
