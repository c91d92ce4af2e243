from arrowframe import DataFrame, RenderMode

df = DataFrame.load("data/shops.csv")

print(df)
print(df.render(RenderMode.SUMMARY))

# One row per city and year
shops = df.to_long("City", name="Year", value="Shops")
print(shops.summary_str(tally=10))

# Years as rows and cities as columns
print(df["City", "2023", "2024"].transpose())

sales = DataFrame.load("data/sales.parquet")
print(sales.summary())
print(sales.tail(3).render("html"))
