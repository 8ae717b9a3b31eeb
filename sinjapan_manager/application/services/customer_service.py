"""Application service for the customer list."""

from sinjapan_manager.application.interfaces import ResourceRepository
from sinjapan_manager.application.schemas import Customer

from .resource_service import ResourceService


class CustomerService(ResourceService[Customer]):
    """Customers, searchable by company name, contact name or email."""

    search_fields = ("company_name", "contact_name", "email")

    def __init__(self, repository: ResourceRepository):
        super().__init__(repository, Customer, "Customer")
