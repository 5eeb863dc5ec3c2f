"""
API package: endpoint adapters, the HTTP transport binding and the
route table.

``endpoints`` turns each ``StringService`` method into an endpoint;
``transport`` binds an endpoint to a POST route; ``router`` lists the
routes the application serves.
"""
