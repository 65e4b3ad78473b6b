import streamlit as st

# Configuration
from pricing.config import get_config

# PricingService interface + static coupon table implementation
from pricing.errors import PricingError
from pricing.logger import configure_logging
from pricing.util import get_pricing_service

st.set_page_config(page_title="Discount Calculator", layout="wide")

config = get_config()
configure_logging()
service = get_pricing_service("static")
fmt = f"{{:,.{config.display_decimals}f}}"

# -----------------------------------------------------------------------------
# Sidebar inputs
# -----------------------------------------------------------------------------
st.sidebar.header("Inputs")

price = st.sidebar.number_input(
    "Price",
    min_value=config.min_price,
    max_value=config.max_price,
    value=config.default_price,
    step=1.0,
)
discount_percent = st.sidebar.slider("Discount (%)", min_value=0.0, max_value=100.0, value=10.0, step=0.5)

coupons = service.list_coupons()
coupon_sel = st.sidebar.selectbox("Coupon", coupons.codes().values)

# -----------------------------------------------------------------------------
# Quotes
# -----------------------------------------------------------------------------
try:
    pct_quote = service.quote(price, discount_percent)
    coupon_quote = service.quote_coupon(price, coupon_sel)
except PricingError as e:
    st.error(str(e))
    st.stop()

c1, c2, c3, c4 = st.columns(4)
c1.metric("Price", fmt.format(price))
c2.metric(f"After {discount_percent:g}%", fmt.format(pct_quote.discounted_price),
          delta=f"-{fmt.format(pct_quote.discount_amount)}", delta_color="inverse")
c3.metric(f"After {coupon_sel}", fmt.format(coupon_quote.discounted_price),
          delta=f"-{fmt.format(coupon_quote.discount_amount)}", delta_color="inverse")
c4.metric("Coupon discount", f"{coupon_quote.discount_percent:g}%")

# -----------------------------------------------------------------------------
# Every coupon against the current price
# -----------------------------------------------------------------------------
st.markdown("### Price under each coupon")
table_df = service.coupon_price_table(price)
st.dataframe(table_df, use_container_width=True)
st.bar_chart(table_df, x="coupon_code", y="discounted_price", use_container_width=True)

with st.expander("About"):
    st.write(
        "Coupon codes are case-sensitive and come from a fixed table. "
        f"Prices are shown with {config.display_decimals} decimals; no rounding is applied to the computed values."
    )
