from html import escape


def payment_success_email(name: str, amount, order_id: str, payment_id: str) -> str:
    """``amount`` is already in the major currency unit (rupees)."""
    name = escape(str(name or ""))
    order_id = escape(str(order_id))
    payment_id = escape(str(payment_id))
    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <title>Payment Confirmation</title>
    <style>
        body {{ background-color: #ffffff; font-family: Arial, sans-serif; font-size: 16px; line-height: 1.4; color: #333333; margin: 0; padding: 0; }}
        .container {{ max-width: 600px; margin: 0 auto; padding: 20px; text-align: center; }}
        .message {{ font-size: 18px; font-weight: bold; margin-bottom: 20px; }}
        .body {{ font-size: 16px; margin-bottom: 20px; }}
        .support {{ font-size: 14px; color: #999999; margin-top: 20px; }}
    </style>
</head>
<body>
    <div class="container">
        <div class="message">Course Payment Confirmation</div>
        <div class="body">
            <p>Dear {name},</p>
            <p>We have received a payment of <b>&#8377;{amount}</b>.</p>
            <p>Your Payment ID is <b>{payment_id}</b></p>
            <p>Your Order ID is <b>{order_id}</b></p>
        </div>
        <div class="support">If you have any questions or need assistance, please feel free to reach out to us at
            <a href="mailto:info@studynotion.com">info@studynotion.com</a>. We are here to help!</div>
    </div>
</body>
</html>"""
