"""
Petclinic - pet record management with traceable, failure-contained persistence.

- petclinic.core: errors, results, logging, settings, protocols
- petclinic.domain: Pet entities
- petclinic.data: reference data managers
- petclinic.service: PetService
- petclinic.views: callers of the service
"""

__version__ = "0.1.0"
