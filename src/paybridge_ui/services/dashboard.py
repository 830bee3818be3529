"""
Admin dashboard operations.

InvoiceDashboard holds the dashboard's working copy (invoice list, create
form, messages) and performs the CRUD calls. Every successful mutation
re-fetches the full list; nothing is patched locally. Confirmation of
destructive actions happens in the page before these methods are called.
"""

from dataclasses import dataclass, field

from paybridge_ui.errors import ApiError, ValidationError
from paybridge_ui.lib import logs, objects
from paybridge_ui.models.invoice import Invoice, InvoiceDraft
from paybridge_ui.services.api_client import BackendClient

LOG = logs.logger(__file__)

DELETE_PROMPT = "Are you sure you want to delete this invoice? This cannot be undone."
CLEAR_PROMPT = (
    "ARE YOU ABSOLUTELY SURE you want to delete ALL invoice history? "
    "This is irreversible!"
)

LOAD_FAILED = "Failed to load invoices."
CREATE_FAILED = "Failed to create invoice."
CREATE_ERROR = "An error occurred. Please try again."
DELETE_ERROR = "An error occurred while deleting the invoice."
CLEAR_ERROR = "An error occurred while clearing history."


def confirm_script(prompt: str) -> str:
    """Return JavaScript that asks the browser to confirm prompt."""
    return f"window.confirm({objects.to_json(prompt)})"


def can_clear(invoice_count: int, is_loading: bool) -> bool:
    """Clearing history is offered only when a loaded list has invoices."""
    return not is_loading and invoice_count > 0


@dataclass
class InvoiceDashboard:
    """
    Working state of the admin dashboard.

    Attributes:
        client: Backend client (carrying the admin session cookies).
        invoices: Last fetched invoice list.
        draft: The create-invoice form.
        is_loading: True while the list is being fetched.
        error: List load failure message.
        form_error: Inline create-form message.
        new_invoice_link: Link returned by the last successful create.
        alert: Message for a failed delete or clear, shown as an alert.
    """

    client: BackendClient
    invoices: list[Invoice] = field(default_factory=list)
    draft: InvoiceDraft = field(default_factory=InvoiceDraft)
    is_loading: bool = False
    error: str = ""
    form_error: str = ""
    new_invoice_link: str = ""
    alert: str = ""

    async def refresh(self) -> None:
        """Fetch the full invoice list."""
        self.is_loading = True
        self.error = ""
        try:
            self.invoices = await self.client.list_invoices()
        except ApiError as exc:
            LOG.error("Failed to load invoices: %s", exc, exc_info=True)
            self.error = LOAD_FAILED
        finally:
            self.is_loading = False

    async def create(self) -> bool:
        """
        Validate and submit the draft.

        On success the form is cleared, the new link is kept and the list
        is re-fetched. On failure the form is left intact.

        Returns:
            True when the backend created the invoice.
        """
        self.form_error = ""
        self.new_invoice_link = ""
        try:
            result = await self.client.create_invoice(self.draft)
        except ValidationError as exc:
            self.form_error = str(exc)
            return False
        except ApiError as exc:
            LOG.error("Error creating invoice: %s", exc, exc_info=True)
            self.form_error = CREATE_ERROR
            return False

        if not result.success:
            self.form_error = result.message or CREATE_FAILED
            return False

        self.new_invoice_link = result.link
        self.draft = InvoiceDraft()
        await self.refresh()
        return True

    async def delete(self, row_id: int) -> bool:
        """Delete one invoice that the admin already confirmed."""
        self.alert = ""
        try:
            result = await self.client.delete_invoice(row_id)
        except ApiError as exc:
            LOG.error("Error deleting invoice %s: %s", row_id, exc, exc_info=True)
            self.alert = DELETE_ERROR
            return False
        if not result.success:
            self.alert = f"Failed to delete invoice: {result.message}"
            return False
        await self.refresh()
        return True

    async def clear(self) -> bool:
        """Delete every invoice after the admin confirmed it."""
        self.alert = ""
        try:
            result = await self.client.clear_invoices()
        except ApiError as exc:
            LOG.error("Error clearing history: %s", exc, exc_info=True)
            self.alert = CLEAR_ERROR
            return False
        if not result.success:
            self.alert = f"Failed to clear history: {result.message}"
            return False
        await self.refresh()
        return True
