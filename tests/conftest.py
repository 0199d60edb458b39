import pytest

ORDERS_CSV = (
    "Date;Order ID;Order Item;Unit Price;Quantity\n"
    "2017-11-17;1;Ball Pen;1.99;50\n"
    "2017-11-17;2;Notebook;12.99;10\n"
    "2017-11-17;3;Binder;4.99;25\n"
    "2017-11-18;4;Pencil;0.99;100\n"
    "2017-11-18;5;Sketch Block;2.99;40\n"
    "2017-11-19;6;Ball Pen;1.99;30\n"
    "2017-11-19;7;Sketch Block;2.99;20\n"
    "2017-11-19;8;Ball Pen;1.99;60\n"
)

REPORT_CSV = (
    "Date,Order ID,Order Item,Unit Price,Quantity,Total\n"
    "2017-11-17,1,Ball Pen,1.99,50,99.50\n"
    "2017-11-17,2,Notebook,12.99,10,129.90\n"
    "2017-11-17,3,Binder,4.99,25,124.75\n"
    "2017-11-18,4,Pencil,0.99,100,99.00\n"
    "2017-11-18,5,Sketch Block,2.99,40,119.60\n"
    "2017-11-19,6,Ball Pen,1.99,30,59.70\n"
    "2017-11-19,7,Sketch Block,2.99,20,59.80\n"
    "2017-11-19,8,Ball Pen,1.99,60,119.40\n"
    ",,Sum,,,811.65\n"
    ",,Ball Pens,,140,\n"
)


@pytest.fixture
def orders_file(tmp_path):
    path = tmp_path / "orders.csv"
    path.write_text(ORDERS_CSV, encoding="utf-8")
    return path


@pytest.fixture
def orders_csv():
    return ORDERS_CSV


@pytest.fixture
def report_csv():
    return REPORT_CSV
