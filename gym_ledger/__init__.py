"""
Gym Ledger

Settlement engine for gym memberships and trainer payroll:
- Discount resolution and final fee derivation per membership type
- Dual (Regular / PT) ledger coordination
- Balance payment validation against the remaining cap
- Renewal classification and renewal quotes
- Trainer salary settlement and salary slips

All engines are pure: they derive every figure from the inputs they are
given and report business-rule violations through ServiceResult.
"""

__version__ = "1.0.0"
