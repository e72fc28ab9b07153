"""
Permission codes for RBAC.

Each protected handler is gated by exactly one code. A user holds a code when
any role of their user type grants it. Codes are grouped by resource in
blocks of a thousand.
"""
PERMISSION_GET_PERMISSION_BY_ID = 1001
PERMISSION_GET_ALL_PERMISSIONS = 1002
PERMISSION_SEARCH_PERMISSION_BY_ID = 1003
PERMISSION_SEARCH_PERMISSION_BY_NAME = 1004

PERMISSION_GET_ROLE_BY_ID = 2001
PERMISSION_GET_ALL_ROLES = 2002
PERMISSION_GET_ALL_PERMISSIONS_OF_ROLE = 2003
PERMISSION_EXIST_ROLE = 2004
PERMISSION_SEARCH_ROLE_BY_NAME = 2005
PERMISSION_SEARCH_ROLE_BY_ID = 2006

PERMISSION_GET_USER_TYPE_BY_ID = 3001
PERMISSION_GET_ALL_USER_TYPES = 3002
PERMISSION_EXIST_USER_TYPE = 3003
PERMISSION_SEARCH_USER_TYPES_BY_ID = 3004
PERMISSION_SEARCH_USER_TYPES_BY_NAME = 3005

PERMISSION_GET_USER_BY_ID = 4001
PERMISSION_GET_ALL_USERS = 4002
PERMISSION_SEARCH_USER_BY_ID = 4003
PERMISSION_SEARCH_USERS_BY_EMAIL = 4004
PERMISSION_UPDATE_USER_STATE = 4005
PERMISSION_UPDATE_USER = 4006
PERMISSION_CREATE_USER = 4007
PERMISSION_USER_HAS_PERMISSION = 4008

PERMISSION_GET_USER_STATE_TYPE_BY_ID = 5001
PERMISSION_GET_ALL_USER_STATE_TYPES = 5002

PERMISSION_GET_ALL_LOGS_FROM_USER = 6001

PERMISSION_GET_EMPLOYEE_BY_ID = 7001
PERMISSION_GET_ALL_EMPLOYEES = 7002
PERMISSION_SEARCH_EMPLOYEES_BY_NAME = 7003
PERMISSION_CREATE_EMPLOYEE = 7004
PERMISSION_UPDATE_EMPLOYEE = 7005
PERMISSION_SEARCH_EMPLOYEES_BY_ID = 7006
PERMISSION_DELETE_EMPLOYEE = 7007

PERMISSION_GET_ITEM_TYPES_BY_ID = 8001
PERMISSION_GET_ITEM_TYPES = 8002

PERMISSION_GET_ITEM_BY_ID = 9001
PERMISSION_GET_ALL_ITEMS = 9002
PERMISSION_SEARCH_ITEMS_BY_ID = 9003
PERMISSION_SEARCH_ITEMS_BY_NAME = 9004
PERMISSION_UPDATE_ITEM_STATE = 9005
PERMISSION_UPDATE_ITEM = 9006
PERMISSION_CREATE_ITEM = 9007
PERMISSION_CHECK_ITEM_STOCK = 9008

PERMISSION_GET_ADDITIONAL_EXPENSE_BY_ID = 10001
PERMISSION_GET_ALL_ADDITIONAL_EXPENSE = 10002
PERMISSION_CREATE_ADDITIONAL_EXPENSE = 10003
PERMISSION_DELETE_ADDITIONAL_EXPENSE = 10004
PERMISSION_UPDATE_ADDITIONAL_EXPENSE = 10005

PERMISSION_GET_HISTORICAL_ITEM_PRICE = 11001

PERMISSION_GET_COMMENT_BY_ID = 12001
PERMISSION_GET_ALL_COMMENTS = 12002
PERMISSION_SEARCH_COMMENTS_BY_EMAIL = 12003
PERMISSION_CREATE_COMMENT = 12004
PERMISSION_UPDATE_COMMENT = 12005
PERMISSION_SEARCH_COMMENTS_BY_NAME = 12006
PERMISSION_SEARCH_COMMENTS_BY_ID = 12007

PERMISSION_GET_APPOINTMENT_BY_ID = 13001
PERMISSION_GET_ALL_APPOINTMENTS = 13002
PERMISSION_SEARCH_APPOINTMENT_BY_STATE = 13003
PERMISSION_GET_APPOINTMENT_BY_CUSTOMER_ID = 13004
PERMISSION_CREATE_APPOINTMENT = 13005
PERMISSION_UPDATE_APPOINTMENT = 13006
PERMISSION_SEARCH_APPOINTMENTS_BY_ID = 13007
PERMISSION_SEARCH_APPOINTMENTS_BY_NAME = 13008
PERMISSION_GET_APPOINTMENTS_BY_CUSTOMERID_AND_DATE = 13009
PERMISSION_DELETE_APPOINTMENT = 13010
PERMISSION_GET_APPOINTMENTS_BY_HOUR = 13011

PERMISSION_GET_ALL_CUSTOMERS = 14001
PERMISSION_GET_CUSTOMER_BY_ID = 14002
PERMISSION_CREATE_CUSTOMER = 14003
PERMISSION_UPDATE_CUSTOMER = 14004
PERMISSION_GET_CUSTOMER_BY_EMAIL = 14005
PERMISSION_SEARCH_CUSTOMERS_BY_ID = 14006
PERMISSION_SEARCH_CUSTOMERS_BY_NAME = 14007
PERMISSION_SEARCH_CUSTOMERS_BY_LASTNAME = 14008
PERMISSION_GET_CUSTOMER_BY_CUSTOMERID = 14009

PERMISSION_GET_ALL_IDENTIFIER_TYPES = 15001
PERMISSION_GET_IDENTIFIER_TYPE_BY_ID = 15002

PERMISSION_GET_ORDER_STATE_TYPE_BY_ID = 16001
PERMISSION_GET_ALL_ORDER_STATE_TYPES = 16002

PERMISSION_GET_PURCHASE_ORDER_BY_ID = 17001
PERMISSION_GET_ALL_PURCHASE_ORDERS = 17002
PERMISSION_SEARCH_PURCHASE_ORDERS_BY_ID = 17003
PERMISSION_GET_PURCHASE_ORDERS_BY_CUSTOMER_ID = 17004
PERMISSION_GET_PURCHASE_ORDERS_BY_SELLER_ID = 17005
PERMISSION_UPDATE_PURCHASE_ORDER_STATE = 17006
PERMISSION_UPDATE_PURCHASE_ORDER = 17007
PERMISSION_CREATE_PURCHASE_ORDER = 17008
PERMISSION_GET_PURCHASE_ORDERS_BY_STATE_ID = 17009

PERMISSION_GET_DISCOUNT_TYPE_BY_ID = 18001
PERMISSION_GET_ALL_DISCOUNT_TYPES = 18002
PERMISSION_CREATE_DISCOUNT_TYPE = 18003

PERMISSION_GET_INVOICE_BY_ID = 19001
PERMISSION_GET_ALL_INVOICES = 19002
PERMISSION_SEARCH_INVOICE_BY_ID = 19003
PERMISSION_SEARCH_INVOICE_BY_CUSTOMER_PERSONAL_ID = 19004
PERMISSION_CREATE_INVOICE = 19005

PERMISSION_CALCULATE_SUBTOTAL = 20001
PERMISSION_CALCULATE_TOTAL = 20002

PERMISSION_GET_TAX_TYPE_BY_ID = 21001
PERMISSION_GET_ALL_TAX_TYPES = 21002
PERMISSION_CREATE_TAX_TYPE = 21003

PERMISSION_GET_EXTERNAL_SALE_BY_ID = 22001
PERMISSION_GET_ALL_EXTERNAL_SALES = 22002
PERMISSION_CREATE_EXTERNAL_SALE = 22003

PERMISSION_VIEW_SALES_REPORT = 23001


# code -> "get_item_by_id"; used to seed the permissions table
ALL_PERMISSIONS = {
    value: name[len("PERMISSION_"):].lower()
    for name, value in dict(globals()).items()
    if name.startswith("PERMISSION_") and isinstance(value, int)
}
