"""
End-to-end scenario package for the leave workflow.

The numbered modules run in order and hand their results to each other
through the scenario side-file:

- test_01: Admin creates the employee and its ESS login
- test_02: Admin assigns the supervisor
- test_03: Employee applies for leave
- test_04: Supervisor approves the request
- test_05: Admin and employee verify the approved status
"""
