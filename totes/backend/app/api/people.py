"""
Employees, customers, comments and identifier types API routes
"""
from typing import List

from fastapi import APIRouter, Depends, Query, Response, status

from app.dependencies import AuditContext, require_permission
from app.models import IdentifierType
from app.permission_config import (
    PERMISSION_CREATE_COMMENT,
    PERMISSION_CREATE_CUSTOMER,
    PERMISSION_CREATE_EMPLOYEE,
    PERMISSION_DELETE_EMPLOYEE,
    PERMISSION_GET_ALL_COMMENTS,
    PERMISSION_GET_ALL_CUSTOMERS,
    PERMISSION_GET_ALL_EMPLOYEES,
    PERMISSION_GET_ALL_IDENTIFIER_TYPES,
    PERMISSION_GET_COMMENT_BY_ID,
    PERMISSION_GET_CUSTOMER_BY_CUSTOMERID,
    PERMISSION_GET_CUSTOMER_BY_EMAIL,
    PERMISSION_GET_CUSTOMER_BY_ID,
    PERMISSION_GET_EMPLOYEE_BY_ID,
    PERMISSION_GET_IDENTIFIER_TYPE_BY_ID,
    PERMISSION_SEARCH_COMMENTS_BY_EMAIL,
    PERMISSION_SEARCH_COMMENTS_BY_ID,
    PERMISSION_SEARCH_COMMENTS_BY_NAME,
    PERMISSION_SEARCH_CUSTOMERS_BY_ID,
    PERMISSION_SEARCH_CUSTOMERS_BY_LASTNAME,
    PERMISSION_SEARCH_CUSTOMERS_BY_NAME,
    PERMISSION_SEARCH_EMPLOYEES_BY_ID,
    PERMISSION_SEARCH_EMPLOYEES_BY_NAME,
    PERMISSION_UPDATE_COMMENT,
    PERMISSION_UPDATE_CUSTOMER,
    PERMISSION_UPDATE_EMPLOYEE,
)
from app.schemas.people import (
    CommentCreate,
    CommentResponse,
    CommentUpdate,
    CustomerCreate,
    CustomerResponse,
    CustomerUpdate,
    EmployeeCreate,
    EmployeeResponse,
    EmployeeUpdate,
    IdentifierTypeResponse,
)
from app.services.catalog_service import CatalogService
from app.services.comment_service import CommentService
from app.services.customer_service import CustomerService
from app.services.employee_service import EmployeeService

employees_router = APIRouter()
customers_router = APIRouter()
comments_router = APIRouter()
identifier_types_router = APIRouter()


# =====================================================
# Employees
# =====================================================

@employees_router.get("/", response_model=List[EmployeeResponse])
def get_all_employees(
    audit: AuditContext = Depends(require_permission(PERMISSION_GET_ALL_EMPLOYEES, "GetAllEmployees")),
):
    employees = EmployeeService.get_all(audit.db)
    audit.log("Employees retrieved")
    return employees


@employees_router.get("/search-by-id", response_model=List[EmployeeResponse])
def search_employees_by_id(
    query: str = Query("", alias="id"),
    audit: AuditContext = Depends(require_permission(PERMISSION_SEARCH_EMPLOYEES_BY_ID, "SearchEmployeesByID")),
):
    employees = EmployeeService.search_by_id(audit.db, query)
    audit.log(f"Employees searched by id '{query}'")
    return employees


@employees_router.get("/search-by-name", response_model=List[EmployeeResponse])
def search_employees_by_name(
    name: str = Query(""),
    audit: AuditContext = Depends(require_permission(PERMISSION_SEARCH_EMPLOYEES_BY_NAME, "SearchEmployeesByName")),
):
    """Matches names or last names."""
    employees = EmployeeService.search_by_name(audit.db, name)
    audit.log(f"Employees searched by name '{name}'")
    return employees


@employees_router.post("/", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
def create_employee(
    body: EmployeeCreate,
    audit: AuditContext = Depends(require_permission(PERMISSION_CREATE_EMPLOYEE, "CreateEmployee")),
):
    try:
        employee = EmployeeService.create(audit.db, body)
    except ValueError as e:
        raise audit.service_error(e)
    audit.log(f"Employee {employee.id} created")
    return employee


@employees_router.put("/{employee_id}", response_model=EmployeeResponse)
def update_employee(
    employee_id: int,
    body: EmployeeUpdate,
    audit: AuditContext = Depends(require_permission(PERMISSION_UPDATE_EMPLOYEE, "UpdateEmployee")),
):
    try:
        employee = EmployeeService.update(audit.db, employee_id, body)
    except ValueError as e:
        raise audit.service_error(e)
    audit.log(f"Employee {employee_id} updated")
    return employee


@employees_router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_employee(
    employee_id: int,
    audit: AuditContext = Depends(require_permission(PERMISSION_DELETE_EMPLOYEE, "DeleteEmployee")),
):
    try:
        EmployeeService.delete(audit.db, employee_id)
    except ValueError as e:
        raise audit.service_error(e)
    audit.log(f"Employee {employee_id} deleted")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@employees_router.get("/{employee_id}", response_model=EmployeeResponse)
def get_employee(
    employee_id: int,
    audit: AuditContext = Depends(require_permission(PERMISSION_GET_EMPLOYEE_BY_ID, "GetEmployeeByID")),
):
    employee = EmployeeService.get_by_id(audit.db, employee_id)
    if not employee:
        raise audit.fail(404, "Employee not found")
    audit.log(f"Employee {employee_id} retrieved")
    return employee


# =====================================================
# Customers
# =====================================================

@customers_router.get("/", response_model=List[CustomerResponse])
def get_all_customers(
    audit: AuditContext = Depends(require_permission(PERMISSION_GET_ALL_CUSTOMERS, "GetAllCustomers")),
):
    customers = CustomerService.get_all(audit.db)
    audit.log("Customers retrieved")
    return customers


@customers_router.get("/search-by-id", response_model=List[CustomerResponse])
def search_customers_by_id(
    query: str = Query("", alias="id"),
    audit: AuditContext = Depends(require_permission(PERMISSION_SEARCH_CUSTOMERS_BY_ID, "SearchCustomersByID")),
):
    customers = CustomerService.search_by_id(audit.db, query)
    audit.log(f"Customers searched by id '{query}'")
    return customers


@customers_router.get("/search-by-name", response_model=List[CustomerResponse])
def search_customers_by_name(
    name: str = Query(""),
    audit: AuditContext = Depends(require_permission(PERMISSION_SEARCH_CUSTOMERS_BY_NAME, "SearchCustomersByName")),
):
    customers = CustomerService.search_by_name(audit.db, name)
    audit.log(f"Customers searched by name '{name}'")
    return customers


@customers_router.get("/search-by-lastname", response_model=List[CustomerResponse])
def search_customers_by_lastname(
    lastname: str = Query(""),
    audit: AuditContext = Depends(require_permission(PERMISSION_SEARCH_CUSTOMERS_BY_LASTNAME, "SearchCustomersByLastname")),
):
    customers = CustomerService.search_by_lastname(audit.db, lastname)
    audit.log(f"Customers searched by lastname '{lastname}'")
    return customers


@customers_router.get("/by-email/{email}", response_model=CustomerResponse)
def get_customer_by_email(
    email: str,
    audit: AuditContext = Depends(require_permission(PERMISSION_GET_CUSTOMER_BY_EMAIL, "GetCustomerByEmail")),
):
    customer = CustomerService.get_by_email(audit.db, email)
    if not customer:
        raise audit.fail(404, "Customer not found")
    audit.log(f"Customer {customer.id} retrieved by email")
    return customer


@customers_router.get("/by-customer-id/{customer_document}", response_model=CustomerResponse)
def get_customer_by_customer_id(
    customer_document: str,
    audit: AuditContext = Depends(require_permission(PERMISSION_GET_CUSTOMER_BY_CUSTOMERID, "GetCustomerByCustomerID")),
):
    """Lookup by personal/tax document number (customer_id field)."""
    customer = CustomerService.get_by_customer_id(audit.db, customer_document)
    if not customer:
        raise audit.fail(404, "Customer not found")
    audit.log(f"Customer {customer.id} retrieved by document")
    return customer


@customers_router.post("/", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
def create_customer(
    body: CustomerCreate,
    audit: AuditContext = Depends(require_permission(PERMISSION_CREATE_CUSTOMER, "CreateCustomer")),
):
    try:
        customer = CustomerService.create(audit.db, body)
    except ValueError as e:
        raise audit.service_error(e)
    audit.log(f"Customer {customer.id} created")
    return customer


@customers_router.put("/{customer_pk}", response_model=CustomerResponse)
def update_customer(
    customer_pk: int,
    body: CustomerUpdate,
    audit: AuditContext = Depends(require_permission(PERMISSION_UPDATE_CUSTOMER, "UpdateCustomer")),
):
    try:
        customer = CustomerService.update(audit.db, customer_pk, body)
    except ValueError as e:
        raise audit.service_error(e)
    audit.log(f"Customer {customer_pk} updated")
    return customer


@customers_router.get("/{customer_pk}", response_model=CustomerResponse)
def get_customer(
    customer_pk: int,
    audit: AuditContext = Depends(require_permission(PERMISSION_GET_CUSTOMER_BY_ID, "GetCustomerByID")),
):
    customer = CustomerService.get_by_id(audit.db, customer_pk)
    if not customer:
        raise audit.fail(404, "Customer not found")
    audit.log(f"Customer {customer_pk} retrieved")
    return customer


# =====================================================
# Comments
# =====================================================

@comments_router.get("/", response_model=List[CommentResponse])
def get_all_comments(
    audit: AuditContext = Depends(require_permission(PERMISSION_GET_ALL_COMMENTS, "GetAllComments")),
):
    comments = CommentService.get_all(audit.db)
    audit.log("Comments retrieved")
    return comments


@comments_router.get("/search-by-id", response_model=List[CommentResponse])
def search_comments_by_id(
    query: str = Query("", alias="id"),
    audit: AuditContext = Depends(require_permission(PERMISSION_SEARCH_COMMENTS_BY_ID, "SearchCommentsByID")),
):
    comments = CommentService.search_by_id(audit.db, query)
    audit.log(f"Comments searched by id '{query}'")
    return comments


@comments_router.get("/search-by-email", response_model=List[CommentResponse])
def search_comments_by_email(
    email: str = Query(""),
    audit: AuditContext = Depends(require_permission(PERMISSION_SEARCH_COMMENTS_BY_EMAIL, "SearchCommentsByEmail")),
):
    comments = CommentService.search_by_email(audit.db, email)
    audit.log(f"Comments searched by email '{email}'")
    return comments


@comments_router.get("/search-by-name", response_model=List[CommentResponse])
def search_comments_by_name(
    name: str = Query(""),
    audit: AuditContext = Depends(require_permission(PERMISSION_SEARCH_COMMENTS_BY_NAME, "SearchCommentsByName")),
):
    comments = CommentService.search_by_name(audit.db, name)
    audit.log(f"Comments searched by name '{name}'")
    return comments


@comments_router.post("/", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
def create_comment(
    body: CommentCreate,
    audit: AuditContext = Depends(require_permission(PERMISSION_CREATE_COMMENT, "CreateComment")),
):
    comment = CommentService.create(audit.db, body)
    audit.log(f"Comment {comment.id} created")
    return comment


@comments_router.put("/{comment_id}", response_model=CommentResponse)
def update_comment(
    comment_id: int,
    body: CommentUpdate,
    audit: AuditContext = Depends(require_permission(PERMISSION_UPDATE_COMMENT, "UpdateComment")),
):
    try:
        comment = CommentService.update(audit.db, comment_id, body)
    except ValueError as e:
        raise audit.service_error(e)
    audit.log(f"Comment {comment_id} updated")
    return comment


@comments_router.get("/{comment_id}", response_model=CommentResponse)
def get_comment(
    comment_id: int,
    audit: AuditContext = Depends(require_permission(PERMISSION_GET_COMMENT_BY_ID, "GetCommentByID")),
):
    comment = CommentService.get_by_id(audit.db, comment_id)
    if not comment:
        raise audit.fail(404, "Comment not found")
    audit.log(f"Comment {comment_id} retrieved")
    return comment


# =====================================================
# Identifier types
# =====================================================

@identifier_types_router.get("/", response_model=List[IdentifierTypeResponse])
def get_all_identifier_types(
    audit: AuditContext = Depends(require_permission(PERMISSION_GET_ALL_IDENTIFIER_TYPES, "GetAllIdentifierTypes")),
):
    identifier_types = CatalogService.get_all(audit.db, IdentifierType)
    audit.log("Identifier types retrieved")
    return identifier_types


@identifier_types_router.get("/{identifier_type_id}", response_model=IdentifierTypeResponse)
def get_identifier_type(
    identifier_type_id: int,
    audit: AuditContext = Depends(require_permission(PERMISSION_GET_IDENTIFIER_TYPE_BY_ID, "GetIdentifierTypeByID")),
):
    identifier_type = CatalogService.get_by_id(audit.db, IdentifierType, identifier_type_id)
    if not identifier_type:
        raise audit.fail(404, "Identifier type not found")
    audit.log(f"Identifier type {identifier_type_id} retrieved")
    return identifier_type
