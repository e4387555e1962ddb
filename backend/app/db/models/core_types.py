import enum


class MaterialOrderStatus(str, enum.Enum):
    # Known values only; the status column stays free text.
    pending = "Pending"
    approved = "Approved"
    shipped = "Shipped"
    delivered = "Delivered"
    cancelled = "Cancelled"
