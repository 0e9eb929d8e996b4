"""Demo data: five warehouses and twenty-one items.

Loaded through the Registry and Catalog, so every record passes the same
validation and capacity checks as an API call.
"""

import structlog

from ledger.item.catalog import create_item
from ledger.warehouse.lookup import all_warehouses
from ledger.warehouse.registry import create_warehouse

logger = structlog.get_logger(__name__)

WAREHOUSES = [
    ("Main Distribution Center", "New York, NY", 10000),
    ("West Coast Hub", "Los Angeles, CA", 8000),
    ("Midwest Warehouse", "Chicago, IL", 7500),
    ("Southern Distribution", "Atlanta, GA", 6000),
    ("Pacific Northwest", "Seattle, WA", 5500),
]

# (sku, name, description, category, quantity, storage location, warehouse index)
ITEMS = [
    ("LAPTOP-001", "Dell Latitude 5520", "15-inch business laptop", "Electronics", 150, "A1-R1-S3", 0),
    ("LAPTOP-002", "MacBook Pro 16", "Professional laptop", "Electronics", 85, "A1-R2-S1", 1),
    ("LAPTOP-003", "HP EliteBook 840", "Lightweight laptop", "Electronics", 120, "A2-R1-S2", 2),
    ("DESK-CHAIR-001", "ErgoMax Executive Chair", "Ergonomic office chair", "Furniture", 200, "B1-R3-S1", 0),
    ("DESK-001", "Standing Desk Pro", "Adjustable height desk", "Furniture", 75, "B2-R1-S2", 1),
    ("DESK-002", "Corner Desk Unit", "L-shaped desk", "Furniture", 60, "B1-R2-S3", 3),
    ("MONITOR-001", "Dell UltraSharp 27", "27-inch 4K monitor", "Electronics", 180, "A3-R1-S1", 0),
    ("MONITOR-002", "LG 34 Ultrawide", "34-inch curved monitor", "Electronics", 95, "A1-R3-S2", 2),
    ("KEYBOARD-001", "Mechanical Keyboard RGB", "Gaming keyboard", "Electronics", 300, "A2-R2-S1", 1),
    ("MOUSE-001", "Wireless Ergonomic Mouse", "Vertical mouse", "Electronics", 250, "A2-R2-S2", 1),
    ("PRINTER-001", "HP LaserJet Pro", "Network printer", "Electronics", 45, "C1-R1-S1", 0),
    ("PRINTER-002", "Canon ImageClass", "Color laser printer", "Electronics", 30, "C1-R2-S1", 3),
    ("PHONE-001", "VoIP Desk Phone", "Business phone", "Electronics", 400, "A3-R2-S1", 0),
    ("TABLET-001", "iPad Pro 12.9", "Professional tablet", "Electronics", 120, "A1-R1-S1", 1),
    ("CABLE-001", "USB-C Cable 6ft", "Charging cable", "Accessories", 1000, "D1-R1-S1", 4),
    ("ADAPTER-001", "USB-C Hub", "Multi-port adapter", "Accessories", 500, "D1-R1-S2", 4),
    ("WHITEBOARD-001", "Mobile Whiteboard", "Rolling whiteboard", "Office Supplies", 35, "B3-R1-S1", 2),
    ("FILING-001", "4-Drawer File Cabinet", "Locking file cabinet", "Furniture", 80, "B2-R3-S1", 3),
    ("LAMP-001", "LED Desk Lamp", "Adjustable desk lamp", "Office Supplies", 150, "D2-R1-S1", 0),
    ("WEBCAM-001", "HD Webcam 1080p", "Conference camera", "Electronics", 200, "A3-R3-S1", 2),
    ("HEADSET-001", "Noise-Canceling Headset", "Wireless headset", "Electronics", 175, "A2-R3-S1", 1),
]


def seed_demo_data() -> bool:
    """Load the demo records into an empty ledger.

    Returns ``False`` without writing anything when warehouses already exist.
    Must be called inside a domain context.
    """
    if all_warehouses():
        logger.info("Ledger already contains data, skipping demo data")
        return False

    warehouses = [create_warehouse(name, location, capacity) for name, location, capacity in WAREHOUSES]
    for sku, name, description, category, quantity, storage_location, index in ITEMS:
        create_item(
            sku=sku,
            name=name,
            warehouse_id=warehouses[index].id,
            quantity=quantity,
            description=description,
            category=category,
            storage_location=storage_location,
        )

    logger.info("Demo data loaded", warehouses=len(WAREHOUSES), items=len(ITEMS))
    return True
