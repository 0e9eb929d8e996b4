"""Repository read helpers shared by the Registry, Catalog and reports."""

from protean.utils.globals import current_domain

from ledger.settings import settings


def fetch_all(element_cls, order_by="created_at", **criteria):
    """Load every record of ``element_cls`` matching ``criteria``.

    Repository queries are limited per call, so whole collections are read
    page by page in a stable order.
    """
    dao = current_domain.repository_for(element_cls)._dao
    page_size = settings.page_size
    records = []
    offset = 0
    while True:
        query = dao.query
        if criteria:
            query = query.filter(**criteria)
        page = query.order_by(order_by).offset(offset).limit(page_size).all().items
        records.extend(page)
        if len(page) < page_size:
            return records
        offset += page_size
