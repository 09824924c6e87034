# -*- coding: utf-8 -*-
# Generated by the protocol buffer compiler.  DO NOT EDIT!
# source: employees/v1/employee.proto
"""Generated protocol buffer code."""
from google.protobuf.internal import builder as _builder
from google.protobuf import descriptor as _descriptor
from google.protobuf import descriptor_pool as _descriptor_pool
from google.protobuf import symbol_database as _symbol_database
# @@protoc_insertion_point(imports)

_sym_db = _symbol_database.Default()




DESCRIPTOR = _descriptor_pool.Default().AddSerializedFile(b'\n\x1b\x65mployees/v1/employee.proto\x12\x0c\x65mployees.v1\"g\n\x0f\x45mployeeMessage\x12\n\n\x02id\x18\x01 \x01(\x03\x12\x12\n\nfirst_name\x18\x02 \x01(\t\x12\x11\n\tlast_name\x18\x03 \x01(\t\x12\r\n\x05\x65mail\x18\x04 \x01(\t\x12\x12\n\ndepartment\x18\x05 \x01(\t\"a\n\x15\x43reateEmployeeRequest\x12\x12\n\nfirst_name\x18\x01 \x01(\t\x12\x11\n\tlast_name\x18\x02 \x01(\t\x12\r\n\x05\x65mail\x18\x03 \x01(\t\x12\x12\n\ndepartment\x18\x04 \x01(\t\" \n\x12GetEmployeeRequest\x12\n\n\x02id\x18\x01 \x01(\x03\"\x18\n\x16GetAllEmployeesRequest\"K\n\x17GetAllEmployeesResponse\x12\x30\n\temployees\x18\x01 \x03(\x0b\x32\x1d.employees.v1.EmployeeMessage\"m\n\x15UpdateEmployeeRequest\x12\n\n\x02id\x18\x01 \x01(\x03\x12\x12\n\nfirst_name\x18\x02 \x01(\t\x12\x11\n\tlast_name\x18\x03 \x01(\t\x12\r\n\x05\x65mail\x18\x04 \x01(\t\x12\x12\n\ndepartment\x18\x05 \x01(\t\"#\n\x15\x44\x65leteEmployeeRequest\x12\n\n\x02id\x18\x01 \x01(\x03\":\n\x16\x44\x65leteEmployeeResponse\x12\x0f\n\x07success\x18\x01 \x01(\x08\x12\x0f\n\x07message\x18\x02 \x01(\t2\xce\x03\n\x13\x45mployeeGrpcService\x12T\n\x0e\x43reateEmployee\x12#.employees.v1.CreateEmployeeRequest\x1a\x1d.employees.v1.EmployeeMessage\x12N\n\x0bGetEmployee\x12 .employees.v1.GetEmployeeRequest\x1a\x1d.employees.v1.EmployeeMessage\x12^\n\x0fGetAllEmployees\x12$.employees.v1.GetAllEmployeesRequest\x1a%.employees.v1.GetAllEmployeesResponse\x12T\n\x0eUpdateEmployee\x12#.employees.v1.UpdateEmployeeRequest\x1a\x1d.employees.v1.EmployeeMessage\x12[\n\x0e\x44\x65leteEmployee\x12#.employees.v1.DeleteEmployeeRequest\x1a$.employees.v1.DeleteEmployeeResponseb\x06proto3')

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, 'employees.v1.employee_pb2', globals())
if _descriptor._USE_C_DESCRIPTORS == False:

  DESCRIPTOR._options = None
  _EMPLOYEEMESSAGE._serialized_start=45
  _EMPLOYEEMESSAGE._serialized_end=148
  _CREATEEMPLOYEEREQUEST._serialized_start=150
  _CREATEEMPLOYEEREQUEST._serialized_end=247
  _GETEMPLOYEEREQUEST._serialized_start=249
  _GETEMPLOYEEREQUEST._serialized_end=281
  _GETALLEMPLOYEESREQUEST._serialized_start=283
  _GETALLEMPLOYEESREQUEST._serialized_end=307
  _GETALLEMPLOYEESRESPONSE._serialized_start=309
  _GETALLEMPLOYEESRESPONSE._serialized_end=384
  _UPDATEEMPLOYEEREQUEST._serialized_start=386
  _UPDATEEMPLOYEEREQUEST._serialized_end=495
  _DELETEEMPLOYEEREQUEST._serialized_start=497
  _DELETEEMPLOYEEREQUEST._serialized_end=532
  _DELETEEMPLOYEERESPONSE._serialized_start=534
  _DELETEEMPLOYEERESPONSE._serialized_end=592
  _EMPLOYEEGRPCSERVICE._serialized_start=595
  _EMPLOYEEGRPCSERVICE._serialized_end=1057
# @@protoc_insertion_point(module_scope)
