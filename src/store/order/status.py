"""Order status administration — command and handler."""

from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from store.domain import store
from store.order.order import Order


@store.command(part_of="Order")
class UpdateOrderStatus:
    order_id: Identifier(required=True)
    order_status: String(max_length=20)
    payment_status: String(max_length=20)
    tracking_number: String(max_length=100)
    admin_notes: Text()


@store.command_handler(part_of=Order)
class UpdateOrderStatusHandler:
    @handle(UpdateOrderStatus)
    def update_status(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.update_status(
            order_status=command.order_status,
            payment_status=command.payment_status,
            tracking_number=command.tracking_number,
            admin_notes=command.admin_notes,
        )
        repo.add(order)
