import os
import random
from datetime import datetime, timedelta

import pyarrow as pa
import pyarrow.csv as csv
import pyarrow.parquet as pq

if not os.path.exists("data"):
    os.mkdir("data")

if not os.path.exists("data/shops.csv"):
    # Number of shops opened in each city, per year
    cities = ["Rome", "Milan", "Naples", "Turin", "Palermo", "Genoa", "Bologna", "Florence", "Bari", "Catania"]
    shops = {"City": cities}
    for year in range(2018, 2025):
        shops[str(year)] = [random.randint(0, 20) for _ in cities]
    csv.write_csv(pa.table(shops), "data/shops.csv")

if not os.path.exists("data/sales.parquet"):
    products = ["Dress", "Car", "Videogame", "Laptop", "TV"]
    start_date = datetime(2023, 1, 1)
    end_date = datetime.now()

    sales = {"Product": [], "Quantity": [], "Price": [], "Timestamp": []}
    for i in range(1000):
        sales["Product"].append(random.choice(products))
        sales["Quantity"].append(random.randint(1, 10))
        sales["Price"].append(round(random.uniform(10, 100), 2))
        sales["Timestamp"].append(
            start_date + timedelta(days=random.randint(0, (end_date - start_date).days))
        )
    pq.write_table(pa.table(sales), "data/sales.parquet")
