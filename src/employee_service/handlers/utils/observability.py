"""
Shared AWS Lambda Powertools instances for the employee service.

Every layer logs, traces and emits metrics through these objects so that a
single invocation produces one correlated stream of structured log lines,
one X-Ray trace and one EMF metrics blob.
"""

from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.metrics import Metrics
from aws_lambda_powertools.tracing import Tracer

METRICS_NAMESPACE = 'EmployeeService'

# Structured JSON logs; POWERTOOLS_SERVICE_NAME and LOG_LEVEL apply
logger: Logger = Logger()

# No-op outside Lambda or with POWERTOOLS_TRACE_DISABLED=true
tracer: Tracer = Tracer()

# POWERTOOLS_METRICS_NAMESPACE overrides the namespace
metrics: Metrics = Metrics(namespace=METRICS_NAMESPACE)
