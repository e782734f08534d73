"""SQL statements issued by the query service.

Search statements take the query term once per ``LIKE`` clause. Columns go
through the ``casefold`` function registered by ``Database.connection``, so
the term must already be casefolded, with ``\\``, ``%`` and ``_`` escaped
by a backslash.
"""

REVENUE = "SELECT month, revenue FROM revenue"

LATEST_INVOICES = """
    SELECT invoices.amount, customers.name, customers.image_url, customers.email, invoices.id
    FROM invoices
    JOIN customers ON invoices.customer_id = customers.id
    ORDER BY invoices.date DESC
    LIMIT 5
"""

INVOICE_COUNT = "SELECT COUNT(*) AS count FROM invoices"

CUSTOMER_COUNT = "SELECT COUNT(*) AS count FROM customers"

INVOICE_STATUS_TOTALS = """
    SELECT
      SUM(CASE WHEN status = 'paid' THEN amount ELSE 0 END) AS paid,
      SUM(CASE WHEN status = 'pending' THEN amount ELSE 0 END) AS pending
    FROM invoices
"""

_INVOICE_SEARCH_FILTER = """
    FROM invoices
    JOIN customers ON invoices.customer_id = customers.id
    WHERE
      casefold(customers.name) LIKE '%' || ? || '%' ESCAPE '\\' OR
      casefold(customers.email) LIKE '%' || ? || '%' ESCAPE '\\' OR
      casefold(invoices.amount) LIKE '%' || ? || '%' ESCAPE '\\' OR
      casefold(invoices.date) LIKE '%' || ? || '%' ESCAPE '\\' OR
      casefold(invoices.status) LIKE '%' || ? || '%' ESCAPE '\\'
"""

# Number of ``?`` placeholders in the invoice search filter
INVOICE_SEARCH_FIELDS = 5

FILTERED_INVOICES = (
    """
    SELECT
      invoices.id,
      invoices.customer_id,
      invoices.amount,
      invoices.date,
      invoices.status,
      customers.name,
      customers.email,
      customers.image_url
    """
    + _INVOICE_SEARCH_FILTER
    + """
    ORDER BY invoices.date DESC
    LIMIT ? OFFSET ?
    """
)

FILTERED_INVOICE_COUNT = "SELECT COUNT(*) AS count" + _INVOICE_SEARCH_FILTER

INVOICE_BY_ID = """
    SELECT
      invoices.id,
      invoices.customer_id,
      invoices.amount,
      invoices.status
    FROM invoices
    WHERE invoices.id = ?
"""

ALL_CUSTOMERS = """
    SELECT
      id,
      name
    FROM customers
    ORDER BY name ASC
"""

FILTERED_CUSTOMERS = """
    SELECT
      customers.id,
      customers.name,
      customers.email,
      customers.image_url,
      COUNT(invoices.id) AS total_invoices,
      SUM(CASE WHEN invoices.status = 'pending' THEN invoices.amount ELSE 0 END) AS total_pending,
      SUM(CASE WHEN invoices.status = 'paid' THEN invoices.amount ELSE 0 END) AS total_paid
    FROM customers
    LEFT JOIN invoices ON customers.id = invoices.customer_id
    WHERE
      casefold(customers.name) LIKE '%' || ? || '%' ESCAPE '\\' OR
      casefold(customers.email) LIKE '%' || ? || '%' ESCAPE '\\'
    GROUP BY customers.id, customers.name, customers.email, customers.image_url
    ORDER BY customers.name ASC
"""

USER_BY_EMAIL = "SELECT id, name, email, password FROM users WHERE email = ?"
