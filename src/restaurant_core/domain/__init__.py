"""Domain layer - Restaurant value objects, entities, and rules.

This layer contains:
- Value Objects: Validated replacements for raw primitives (Quantity, OrderId,
  Hour, OperatingHours, Money, Email)
- Entities: Objects with identity and lifecycle (Table) and the records built
  from validated values (Order, OrderLine, MenuItem, Customer)
- Domain Exceptions: Rejected inputs and broken invariants

The domain layer has NO dependencies on external frameworks or infrastructure.
Nothing here logs; callers decide what to do with a rejection.
"""
