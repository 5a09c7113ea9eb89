from fastapi import APIRouter

from alpha_agent.dashboard.schemas import DashboardReport
from alpha_agent.dashboard.service import build_dashboard
from alpha_agent.dependencies import ViewStateMachineDep

router = APIRouter()


@router.get("", response_model=DashboardReport)
async def get_dashboard(machine: ViewStateMachineDep) -> DashboardReport:
    return build_dashboard(machine.state)
