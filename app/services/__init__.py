# Services package.
#
#   product_service    : create / read / update / delete / list for Product
#   inventory_service  : per-product stock level, read and set
#
# Service functions take an AsyncSession as their first argument so that
# the router layer controls the transaction boundary via ``get_db``.
