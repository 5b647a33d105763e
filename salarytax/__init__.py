"""SalaryTax - income-tax engine for Indian salaried employees."""
