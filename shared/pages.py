"""HTML pages shown to the buyer after the hosted checkout redirects back."""

from html import escape

_PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>{title}</title>
    <style>
        body {{
            font-family: Arial, sans-serif;
            display: flex;
            justify-content: center;
            align-items: center;
            height: 100vh;
            margin: 0;
            background-color: #f0f0f0;
        }}
        .container {{
            text-align: center;
            padding: 20px;
            background-color: white;
            border-radius: 8px;
            box-shadow: 0 2px 4px rgba(0,0,0,0.1);
        }}
        .icon {{
            color: {color};
            font-size: 48px;
            margin-bottom: 20px;
        }}
        .button {{
            display: inline-block;
            padding: 10px 20px;
            background-color: {color};
            color: white;
            text-decoration: none;
            border-radius: 4px;
            margin-top: 20px;
        }}
    </style>
</head>
<body>
    <div class="container">
        <div class="icon">{icon}</div>
        <h1>{heading}</h1>
{lines}
        <a href="/" class="button">Quay lại trang chủ</a>
    </div>
</body>
</html>
"""

SUCCESS_COLOR = "#4CAF50"
CANCEL_COLOR = "#f44336"


def _render(title: str, heading: str, icon: str, color: str, lines: list[str]) -> str:
    body = "\n".join(f"        <p>{line}</p>" for line in lines)
    return _PAGE_TEMPLATE.format(
        title=title,
        heading=heading,
        icon=icon,
        color=color,
        lines=body,
    )


def render_success_page(order_code: str | None, status: str | None) -> str:
    return _render(
        title="Thanh toán thành công",
        heading="Thanh toán thành công!",
        icon="✓",
        color=SUCCESS_COLOR,
        lines=[
            f"Mã đơn hàng: {escape(order_code or '')}",
            f"Trạng thái: {escape(status or '')}",
        ],
    )


def render_cancel_page(order_code: str | None) -> str:
    return _render(
        title="Hủy thanh toán",
        heading="Đã hủy thanh toán",
        icon="✕",
        color=CANCEL_COLOR,
        lines=[f"Mã đơn hàng: {escape(order_code or '')}"],
    )
