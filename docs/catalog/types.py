list_shift_types_description = """
List shift types. With `specialty`, only global types and the custom types of that specialty are returned.

Each entry carries the definition (`id`, `displayName`, `abbreviation`, `durationHours`, `startTime`, `endTime`,
`specialtyScope`) plus:

- `standard`: Whether it is one of the fixed standard types
- `night`: Whether it counts as a night shift for the rest rule (Night and NightGuard only)
- `displayBucket`: "day" or "night" slot used by day views, null for untimed types
"""

create_shift_type_description = """
Create a custom shift type for one specialty.

### Request Body

- `name`: Display name, unique across all shift types (case-insensitive)
- `abbreviation`: Abbreviation, unique across all shift types (case-insensitive)
- `startTime`, `endTime`: `HH:MM`; an end at or before the start denotes an overnight shift
- `specialty`: Name of the specialty the type belongs to

The duration is computed from the clock times. Duplicates raise 409, unknown specialties and equal start/end
times raise 400.
"""

delete_shift_type_description = """
Delete a custom shift type. Standard types cannot be deleted (400) and types used by any shift cannot be
deleted (409).
"""
