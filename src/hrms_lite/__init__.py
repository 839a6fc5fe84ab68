"""HRMS Lite package.

Employee roster and daily attendance log behind a small REST/JSON API. The
package is organized by feature modules (employees, attendance, summary) with
a thin Flask controller layer over service/repository layers.
"""

__version__ = "1.0.0"
