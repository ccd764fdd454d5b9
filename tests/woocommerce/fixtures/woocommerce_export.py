"""Export snippets taken from a real shop's WooCommerce and product CSVs.

Two orders, nine rows: order 5358 (total "57,10", 4 items, 5 € shipping)
followed by order 5357 (total "57,90", 5 items, local pick up).
"""

from __future__ import annotations

HEADER = (
    '"Order ID","Order Date","Order Status","Customer Name","Order Total",'
    '"Order Shipping","Payment Gateway","Shipping Method",'
    '"Shipping Address Line 1","Shipping Address Line 2",'
    '"Shipping Zip/Postcode","Billing Phone Number",_transaction_id,'
    '"Product Name","Quantity of items purchased","Item price EXCL. tax"'
)

EXPORT_CSV = (
    HEADER
    + "\n"
    + r'''5358,2020/05/24,processing,"PERINO LUPO","57,10",5,"PayPal o carta di credito",flat_rate:1,"VIA DEI PAZZI 0","SCALA A DESTRA SECONDO PIANO",20146,3355700000,0P128552W4082524Y,"SELEZIONE B ""IL VEGETARIANO""",1,40
5358,2020/05/24,processing,"PERINO LUPO","57,10",5,"PayPal o carta di credito",flat_rate:1,"VIA DEI PAZZI 0","SCALA A DESTRA SECONDO PIANO",20146,3355700000,0P128552W4082524Y,"CARNE TRITA DI MANZO PER RAGU' E POLPETTE 500 g",1,3.5
5358,2020/05/24,processing,"PERINO LUPO","57,10",5,"PayPal o carta di credito",flat_rate:1,"VIA DEI PAZZI 0","SCALA A DESTRA SECONDO PIANO",20146,3355700000,0P128552W4082524Y,"FETTINE DI LONZA DI SUINO 500 g",1,4
5358,2020/05/24,processing,"PERINO LUPO","57,10",5,"PayPal o carta di credito",flat_rate:1,"VIA DEI PAZZI 0","SCALA A DESTRA SECONDO PIANO",20146,3355700000,0P128552W4082524Y,"GALLETTO VALLE SPLUGA ALLE ERBE DI MONTAGNA 500 g",1,4.6
5357,2020/05/24,processing,"Maria Luisa","57,90",0,"PayPal o carta di credito",flat_rate:1,"Via Da Qui 1",,20129,3332750000,5L1092726H247623G,"INSALATA VARIA 500 g",1,1.4
5357,2020/05/24,processing,"Maria Luisa","57,90",0,"PayPal o carta di credito",flat_rate:1,"Via Da Qui 1",,20129,3332750000,5L1092726H247623G,"SELEZIONE B ""IL VEGETARIANO""",1,40
5357,2020/05/24,processing,"Maria Luisa","57,90",0,"PayPal o carta di credito",flat_rate:1,"Via Da Qui 1",,20129,3332750000,5L1092726H247623G,"YOGURT DI CAPRA 500 g",1,3
5357,2020/05/24,processing,"Maria Luisa","57,90",0,"PayPal o carta di credito",flat_rate:1,"Via Da Qui 1",,20129,3332750000,5L1092726H247623G,"10 ARROSTICINI DI SUINO 300 g",1,5
5357,2020/05/24,processing,"Maria Luisa","57,90",0,"PayPal o carta di credito",flat_rate:1,"Via Da Qui 1",,20129,3332750000,5L1092726H247623G,"PANE AI CEREALI ANTICHI 500 g",1,3.5
'''
)

PRODUCT_CSV = """Progressivo;Categoria;Provenienza;Preincartato al KG;Tipo Articolo;Codice di partenza;Prodotto;Prezzo;Unita;Iva;Reparto fiscale;Codice PLU Olivetti;12 caratteri EAN;EAN 13 proprio;EAN 13 fornitore
1;FORMAGGI;agricolo;0;5;50001;Mozzarella BIO 350 gr;4,50;pezzo;4%;1;50001;;;2130001004009
2;PRODOTTI MANIPOLATI O TRASFORMATI;agricolo;0;5;;PANE CER ANTICH 500 G;3,50;pezzo;4%;1;50002;;;2130002003704
3;CEREALI;agricolo;0;5;;RISO 1 KG;2,50;pezzo;4%;1;50003;;;2130003002508
9;ORTAGGI;agricolo;0;5;;sc-CAROTE 500 G;1,00;pezzo;4%;1;50012;;;2109042020040
17;CARNI E SALUMI;agricolo;0;5;;PROSCIUT. COTTO 200 G;3,70;pezzo;10%;2;50004;;;2130004003702
22;CARNI E SALUMI;agricolo;0;5;;GALLETTO VALLE SPLUGA ALLE ERBE DI MONTAGNA 500 g;4,00;pezzo;10%;2;50022;;2130022004002;
24;CARNI E SALUMI;agricolo;0;5;;SALAME PICCOLO 200 G;4,00;pezzo;10%;2;50024;;;2109042020170
"""


def make_row(
    order_id: str = "1",
    *,
    customer_name: str = "Mario Rossi",
    order_total: str = "10,00",
    shipping: str = "0",
    product_name: str = "PRODOTTO",
    quantity: str = "1",
    item_price: str = "10",
) -> str:
    """Build one export line with sensible defaults for unspecified columns."""
    fields = [
        order_id,
        "2020/05/24",
        "processing",
        customer_name,
        order_total,
        shipping,
        "PayPal o carta di credito",
        "flat_rate:1",
        "Via Roma 1",
        "",
        "20100",
        "3330000000",
        "TX1",
        product_name,
        quantity,
        item_price,
    ]
    return ",".join(f'"{field}"' for field in fields)
