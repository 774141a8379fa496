"""
Trainer payroll engines.

Provides:
- PayrollSettlementService: attendance-based salary proration
- SalarySlipService: printable salary slip assembly and rendering
"""

from gym_ledger.services.payroll.payroll_settlement_service import PayrollSettlementService
from gym_ledger.services.payroll.salary_slip_service import SalarySlipService

__all__ = ["PayrollSettlementService", "SalarySlipService"]
